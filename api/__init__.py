"""HTTP surface of the landing page API."""
