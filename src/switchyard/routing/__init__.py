"""Routing — ordered route table with segment-wise matching.

The table is built once from a list of controllers when the dispatcher
is constructed and never changes afterwards.
"""
