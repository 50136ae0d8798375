"""HTTP API for the five_whys tool."""
