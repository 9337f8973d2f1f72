from enum import Enum


class SortOrder(str, Enum):
    asc = "ASC"
    desc = "DESC"

    @classmethod
    def coerce(cls, value: "SortOrder | str | None") -> "SortOrder":
        if isinstance(value, SortOrder):
            return value
        if isinstance(value, str) and value.strip().upper() == cls.desc.value:
            return cls.desc
        return cls.asc
