from setuptools import setup, find_packages

setup(
    name="yc-company-core",
    version="0.0.1",
    description="YC 公司頁面爬取與結構化核心功能庫",
    packages=find_packages(exclude=["tests.*", "tests", "example.*", "example"]),
    python_requires=">=3.9",
    install_requires=[
        "aiohttp>=3.8.0",
        "beautifulsoup4>=4.9.3",
        "pydantic>=2.0.0",
        "tenacity>=8.0.0",
        "python-dotenv>=0.19.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0.0",
            "pytest-asyncio>=0.21.0",
            "black>=22.0.0",
            "isort>=5.0.0",
            "mypy>=0.900",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    keywords="scraping, crawler, startups",
)
