"""Browser automation helpers shared by the smoke, integration and E2E suites."""
