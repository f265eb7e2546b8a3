"""HTTP front-end for Redirect Resolver."""
