from .artists import get_ticketmaster_ids, merge_followed_artists, sync_followed_artists

__all__ = ["get_ticketmaster_ids", "merge_followed_artists", "sync_followed_artists"]
