import os

from config.config import *  # noqa: F401,F403

DEBUG = bool(int(os.getenv("DEBUG", "1")))
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()

# Salary structure used for payslip breakdowns; None disables it
PAYROLL_RULE = {
    "basic_percentage": "40",
    "hra_percentage": "40",
    "conveyance": "1600",
    "medical": "1250",
    "pf_calculation_method": "percentage",
    "pf_percentage": "12",
    "employer_pf_percentage": "12",
}
