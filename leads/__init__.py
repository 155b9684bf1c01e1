"""Lead records and the aggregate queries that feed the charts."""
