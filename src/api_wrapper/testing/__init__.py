"""Testing utilities for endpoint wrappers built on the API client.

This module provides a fake provider and response factories so endpoint
wrappers can be tested without a token server or network.

Example:
    ```python
    from api_wrapper.testing import FakeProvider, create_error_response


    def test_invoice_not_found():
        provider = FakeProvider(lambda request: create_error_response(404, meta={"entity_type": "invoice"}))
        invoices = InvoicesEndpoint(provider)
        with pytest.raises(NotFoundError):
            invoices.get(42)
    ```
"""

from api_wrapper.testing.factories import FakeProvider, create_error_response, create_mock_response

__all__ = [
    "FakeProvider",
    "create_error_response",
    "create_mock_response",
]
