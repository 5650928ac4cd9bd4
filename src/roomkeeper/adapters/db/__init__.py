"""SQL database plumbing: engine factory, metadata, schema and custom types."""
