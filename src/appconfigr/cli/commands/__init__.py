"""Click commands registered on the ``appconfigr`` group."""
