"""
VPC Source Share

Reads the source share of an IBM Cloud VPC replica file share and projects it
into a flat, schema-checked attribute set, augmented with the share's user
and access management tags.
"""

__version__ = "0.1.0"
