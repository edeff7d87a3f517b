# app/normalizers/aliases.py
from typing import Dict, Tuple

# Canonical field -> keys probed in order. Canonical key first, then
# English spelling variants, then the localized (Chinese) keys the model
# tends to emit when the card itself is in Chinese.
FIELD_ALIASES: Dict[str, Tuple[str, ...]] = {
    "name":           ("name", "full_name", "姓名"),
    "position":       ("position", "job_title", "title", "职位"),
    "email":          ("email", "电子邮件", "邮箱"),
    "phone":          ("phone", "phone_number", "电话号码", "电话"),
    "companyName":    ("companyName", "company_name", "公司名称", "公司"),
    "companyAddress": ("companyAddress", "company_address", "公司地址", "地址"),
    "category":       ("category", "类别"),
}
