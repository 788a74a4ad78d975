"""
Pluggable uniform random sources.

Each source is seed-constructible and exposes a single `next_u64()` draw.
Use `sources.registry.get_source_factory(name)` to look one up by name.
"""
