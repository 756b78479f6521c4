"""HTTP API for ViralAudit."""
