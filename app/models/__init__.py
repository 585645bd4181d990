"""
Models module - data access for each resource.

Each module issues parameterized SQL through app.db.postgres.execute_sql and
returns plain dicts, raising app.core.errors on not-found / duplicate input:
- company: companies, keyed by handle
- job: job postings, keyed by serial id
- user: accounts, authentication and job applications
"""
