"""Tools package for siteguard."""
