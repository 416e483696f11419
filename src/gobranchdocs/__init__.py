"""Open pkg.go.dev documentation for the commit you have checked out."""
