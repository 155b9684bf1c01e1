"""Chart construction and lifecycle helpers for the lead charts dashboard.

Chart.js configs are built on the server from view-model DTOs. Each config is
bound to a named canvas through a `Chart` handle that the lifecycle manager
owns, so a canvas never carries more than one live chart.
"""
