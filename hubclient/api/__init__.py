"""HTTP layer: client handle, typed dispatch and path templates."""
