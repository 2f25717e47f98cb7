"""Names of the bus topics used by the notification hub."""

# Inbound requests
REQUEST_ALL = "notifications.getAll"
REQUEST_READ = "notifications.read"
REQUEST_READ_ALL = "notifications.allRead"
REQUEST_TRASH = "notifications.trash"
REQUEST_TRASH_ALL = "notifications.trashAll"

# Outbound broadcasts
NEW = "notifications.new"
INBOX = "notifications.all"

__all__ = [
    "REQUEST_ALL",
    "REQUEST_READ",
    "REQUEST_READ_ALL",
    "REQUEST_TRASH",
    "REQUEST_TRASH_ALL",
    "NEW",
    "INBOX",
]
