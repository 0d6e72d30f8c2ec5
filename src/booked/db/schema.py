# ABOUTME: SQL DDL for the Booked library database.
# ABOUTME: A single state table holds each registry as a JSON blob keyed by name.

SCHEMA_V1 = """
-- Named state blobs: 'libraries' and 'follows'
CREATE TABLE IF NOT EXISTS state (
    name          TEXT PRIMARY KEY,
    payload       TEXT NOT NULL,
    date_modified TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%S', 'now'))
);
"""
