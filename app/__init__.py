"""
Jobly
A job board REST API.

Architecture:
- app.api: FastAPI routers (auth, companies, jobs, users)
- app.models: per-resource data access issuing parameterized SQL
- app.utils.sql: partial-update and filter-query builders
"""

__version__ = "1.0.0"
