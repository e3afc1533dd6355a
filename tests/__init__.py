# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the FinnaCalc API:
# - test_utils.py: Lenient number parsing
# - test_cashflow.py, test_business_calculators.py, test_personal_calculators.py,
#   test_loan.py, test_tax.py, test_budget.py: Calculator unit tests
# - test_market_data_service.py, test_email_service.py, test_chat_service.py:
#   Provider services against mocked transports/clients
# - test_api.py: Endpoint tests through TestClient
#
# Run tests with: pytest
# =============================================================================
