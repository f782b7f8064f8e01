"""VisaPilot - visa agency and clinic CRM API."""
