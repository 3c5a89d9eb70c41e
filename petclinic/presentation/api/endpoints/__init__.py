"""HTTP endpoints of the gateway and customers applications."""
