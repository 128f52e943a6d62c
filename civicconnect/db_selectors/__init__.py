"""
Store boundaries: every read and write against the issue, profile and
identity tables goes through this package. Store errors surface as
``RemoteFailure``.
"""
