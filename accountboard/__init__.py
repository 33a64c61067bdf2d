"""AccountBoard: schema provisioning, backend API and HTTP client."""
