# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the business logic behind the API:
# - models/: Pydantic schemas for calculator inputs, results and proxies
# - calculators/: pure financial calculator functions
# - services/: clients for Alpha Vantage, Resend and OpenAI
#
# Nothing here imports FastAPI. Errors are raised as app.exceptions types
# and turned into responses by the app layer.
# =============================================================================
