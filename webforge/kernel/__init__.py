"""Build engine kernel: domain models, ports, and orchestration."""
