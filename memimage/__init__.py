# memimage
# Validated scalar fields for in-memory domain entities

"""
Core invariant: a field value that has been stored satisfies every
rule registered for that field. Values are normalized before they
are validated, and a rejected write leaves the field unchanged.

This package implements the validated field mechanism and a small
banking model (Bank) that shows it in use.
"""
