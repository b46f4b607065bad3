"""Order lifecycle core: domain, application and infrastructure layers."""
