"""Example: run a monthly payroll reconciliation through the service layer (no Flask).

Controllers are thin; the pipeline lives in PayrollReportService.
"""

import importlib
from datetime import date

from config import get_settings_module

from src.payroll_engine.payroll_engine.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)

    today = date.today()
    svc = container.payroll_report_service
    run = svc.run(start=today.replace(day=1), end=today)

    print(svc.export_csv(run))
    for failure in run.failures:
        print(f"[skipped] {failure.employee_id} {failure.work_date or ''} {failure.error_type}: {failure.message}")


if __name__ == "__main__":
    main()
