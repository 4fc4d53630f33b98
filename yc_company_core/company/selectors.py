"""公司頁面的 CSS 選擇器與位置對照表

頁面版型若有變動，只需修改此檔案。
"""
from typing import Dict

# 基本資訊
NAME = "h1"
DESCRIPTION = ".whitespace-pre-line"

# 成立年份 / 團隊人數 / 所在地：標籤與數值交錯排列的 span
FACT_SPANS = 'div[class="space-y-0.5"] div span'
FACT_POSITIONS: Dict[str, int] = {
    "founded": 1,
    "team_size": 3,
    "location": 5,
}

# 職缺
JOB_ROW = ".divide-gray-200 .py-4"
JOB_TITLE = ".pr-4"
JOB_ATTRIBUTE = ".justify-left .list-item"
JOB_ATTRIBUTE_POSITIONS: Dict[str, int] = {
    "location": 0,
    "pay": 1,
    "equity": 2,
    "experience": 3,
}

# 創辦人
FOUNDER_CARD = ".space-y-5 .flex"
FOUNDER_INFO = ".flex-grow"
FOUNDER_NAME = "h3"
FOUNDER_DESCRIPTION = "p"
FOUNDER_LINK_CARD = ".ycdc-card"

# 發表文章
LAUNCH_POST = ".company-launch"
LAUNCH_TITLE = "h3"
LAUNCH_DESCRIPTION = "div"

LINK = "a[href]"
