from __future__ import annotations

from enum import StrEnum


class Role(StrEnum):
    XIAO_HUANG = "xiaoHuang"
    XIAO_ZHANG = "xiaoZhang"

    @property
    def partner(self) -> Role:
        """The other participant; every card goes from a role to its partner."""
        if self is Role.XIAO_HUANG:
            return Role.XIAO_ZHANG
        return Role.XIAO_HUANG
