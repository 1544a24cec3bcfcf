"""Server bridge — connects a transport to a perch handler.

Reads each transport request into an immutable ``Request``, runs the
handler, folds the outcome into a ``Response`` and writes it back.
"""
