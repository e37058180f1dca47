"""Status service reporting identity, time and uptime over HTTP."""
