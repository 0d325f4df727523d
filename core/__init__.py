"""Core functionality for hacl.

This package contains:
- client: HubClient for the Home Assistant REST API
- config: Configuration file and environment handling
- decoder: Template response decoding
- discovery: Area catalog discovery
- selection: Interactive area selection
- toggle: Light toggle dispatch
- errors: Error types with remediation hints
"""
