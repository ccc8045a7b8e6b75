"""Test configuration and fixtures."""

import logfire

# Keep test output quiet and local
logfire.configure(send_to_logfire=False, console=False)
