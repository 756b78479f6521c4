"""Report exporters for ViralAudit."""

from viralaudit.export.report import generate_report, generate_report_json, save_report

__all__ = ["generate_report", "generate_report_json", "save_report"]
