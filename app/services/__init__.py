from .meetup import (
    create_meetup,
    delete_meetup,
    list_meetups,
    update_meetup,
)

__all__ = [
    "create_meetup",
    "delete_meetup",
    "list_meetups",
    "update_meetup",
]
