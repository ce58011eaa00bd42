"""Internal modules for the apicall SDK.

These are the building blocks behind the public `call_api` and
`call_auth_api` helpers. Import from `apicall_sdk` instead.

Modules:
    dispatch - Verb routing and bearer-token injection
    transport - httpx-backed transport
    http - Shared HTTP client configuration
    log - stderr diagnostics
    redaction - Masking of sensitive headers in diagnostics
"""
