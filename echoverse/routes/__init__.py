# HTTP route modules.
