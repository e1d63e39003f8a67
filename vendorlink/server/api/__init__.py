"""HTTP API of the VendorLink server."""
