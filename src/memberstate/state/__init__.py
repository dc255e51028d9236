"""State/merge layer.

This package is the single place where membership and presence updates
are merged into a :class:`~memberstate.models.member.MemberState`.
"""
