"""ViralAudit - brutal ad video critique backed by a multimodal model."""

__version__ = "0.1.0"
