"""Service layer — name operations returning ServiceResult.

Services sit between the CLI and the domain layer.  They never raise for
bad input; parse failures come back as ``ServiceResult(ok=False)``.
"""
