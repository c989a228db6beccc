"""Activity feed app package

Read-only aggregation over the forum, blog and events apps: the merged
home-page activity feed, forum highlights, the needs-answer queue and
member profiles.  The app owns no models; every response is computed
from current rows.
"""
