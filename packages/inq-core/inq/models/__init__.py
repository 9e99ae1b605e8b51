from inq.models.config import PromptConfig, Weekday
from inq.models.dates import DateInfo, DateOutput, DateSelect, DateSelectConfig
from inq.models.results import ActionResult, PromptResult, PromptStatus, Validation
from inq.models.select import ListOption, Select

__all__ = [
    "PromptConfig", "Weekday",
    "DateInfo", "DateOutput", "DateSelect", "DateSelectConfig",
    "ActionResult", "PromptResult", "PromptStatus", "Validation",
    "ListOption", "Select",
]
