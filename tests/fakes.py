"""In-memory stand-ins for an asyncpg pool and connection.

Only the statements issued by the goevergreen repositories are understood;
anything else raises so a changed query shows up as a failing test.
"""
from datetime import datetime, timezone, timedelta


class FakeConnection:
    def __init__(self):
        self.subscribers = {}
        self.contacts = []
        self.page_views = []
        self.sessions = {}
        self.conversions = []
        self.executed = []
        self.fail_on = set()
        self._next_id = 1

    def _check(self, query):
        self.executed.append(" ".join(query.split()))
        for marker in self.fail_on:
            if marker in query:
                raise ConnectionError(f"simulated failure on {marker}")

    def _new_id(self):
        value = self._next_id
        self._next_id += 1
        return value

    async def fetchval(self, query, *args):
        self._check(query)

        if "INSERT INTO newsletter_subscribers" in query:
            email, name, subscribed_at = args
            existing = self.subscribers.get(email)
            row_id = existing["id"] if existing else self._new_id()
            self.subscribers[email] = {
                "id": row_id,
                "email": email,
                "name": name,
                "subscribed_at": subscribed_at,
                "confirmed": False,
                "unsubscribed": False,
            }
            return row_id

        if "SELECT COUNT(*) FROM newsletter_subscribers" in query:
            return sum(1 for row in self.subscribers.values() if not row["unsubscribed"])

        if "INSERT INTO contact_submissions" in query:
            name, email, message, submitted_at = args
            row_id = self._new_id()
            self.contacts.append({
                "id": row_id,
                "name": name,
                "email": email,
                "message": message,
                "submitted_at": submitted_at,
                "status": "new",
            })
            return row_id

        raise AssertionError(f"Unexpected fetchval: {query}")

    async def execute(self, query, *args):
        self._check(query)

        if query.strip().startswith("CREATE"):
            return "CREATE"

        if "UPDATE newsletter_subscribers SET unsubscribed = TRUE" in query:
            row = self.subscribers.get(args[0])
            if row:
                row["unsubscribed"] = True
                return "UPDATE 1"
            return "UPDATE 0"

        if "INSERT INTO user_sessions" in query:
            session_id, timestamp, country, user_agent = args
            session = self.sessions.get(session_id)
            if session:
                session["last_activity"] = timestamp
                session["page_count"] += 1
            else:
                self.sessions[session_id] = {
                    "id": session_id,
                    "created_at": timestamp,
                    "last_activity": timestamp,
                    "page_count": 1,
                    "country": country,
                    "user_agent": user_agent,
                }
            return "INSERT 0 1"

        if "INSERT INTO page_views" in query:
            path, user_agent, country, referrer, timestamp, session_id = args
            self.page_views.append({
                "id": self._new_id(),
                "path": path,
                "user_agent": user_agent,
                "country": country,
                "referrer": referrer,
                "timestamp": timestamp,
                "session_id": session_id,
            })
            return "INSERT 0 1"

        if "INSERT INTO conversions" in query:
            conversion_type, session_id, value, timestamp = args
            self.conversions.append({
                "type": conversion_type,
                "session_id": session_id,
                "value": value,
                "timestamp": timestamp,
            })
            return "INSERT 0 1"

        if "DELETE FROM page_views WHERE timestamp < $1" in query:
            before = len(self.page_views)
            self.page_views = [row for row in self.page_views if row["timestamp"] >= args[0]]
            return f"DELETE {before - len(self.page_views)}"

        if "DELETE FROM user_sessions WHERE created_at < $1" in query:
            stale = [key for key, row in self.sessions.items() if row["created_at"] < args[0]]
            for key in stale:
                del self.sessions[key]
            return f"DELETE {len(stale)}"

        raise AssertionError(f"Unexpected execute: {query}")

    async def fetchrow(self, query, *args):
        self._check(query)

        if "FROM page_views" in query:
            rows = [row for row in self.page_views if row["timestamp"] > args[0]]
            return {
                "total_page_views": len(rows),
                "unique_visitors": len({row["session_id"] for row in rows}),
            }

        raise AssertionError(f"Unexpected fetchrow: {query}")

    async def fetch(self, query, *args):
        self._check(query)
        rows = [row for row in self.page_views if row["timestamp"] > args[0]]

        if "GROUP BY path" in query:
            grouped = {}
            for row in rows:
                grouped.setdefault(row["path"], []).append(row)
            result = [
                {
                    "path": path,
                    "views": len(items),
                    "unique_views": len({item["session_id"] for item in items}),
                    "countries": len({item["country"] for item in items}),
                }
                for path, items in grouped.items()
            ]
            result.sort(key=lambda item: item["views"], reverse=True)
            return result[:args[1]]

        if "GROUP BY country" in query:
            grouped = {}
            for row in rows:
                if row["country"] != "Unknown":
                    grouped.setdefault(row["country"], []).append(row)
            result = [
                {
                    "country": country,
                    "views": len(items),
                    "unique_visitors": len({item["session_id"] for item in items}),
                }
                for country, items in grouped.items()
            ]
            result.sort(key=lambda item: item["views"], reverse=True)
            return result[:10]

        raise AssertionError(f"Unexpected fetch: {query}")


class FakePool:
    def __init__(self, connection=None):
        self.connection = connection or FakeConnection()
        self.released = 0

    async def acquire(self):
        return self.connection

    async def release(self, connection):
        self.released += 1

    async def close(self):
        pass


def days_ago(days, now=None):
    return (now or datetime.now(timezone.utc)) - timedelta(days=days)


def wordpress_page(body, title="Sample Page – GoEvergreen", description=None, head_extra=""):
    meta = f'<meta name="description" content="{description}">' if description else ""
    return f"""<!DOCTYPE html>
<html>
<head>
<title>{title}</title>
{meta}
<link rel='stylesheet' id='theme-css' href='https://goevergreen9.wordpress.com/wp-content/themes/style.css' media='all' />
<link rel='stylesheet' id='admin-bar-css' href='https://s0.wp.com/wp-includes/css/admin-bar.min.css' media='all' />
<style id='global-styles-inline-css'>body {{ color: #333; }}</style>
{head_extra}
</head>
<body class="home page">
<a class="skip-link screen-reader-text" href="#main">Skip to content</a>
<div id="wpadminbar" class="nojq">Admin toolbar</div>
{body}
<div class="marketing-bar">Design a site like this with WordPress.com Get started</div>
<footer class="site-footer"><a href="https://wordpress.com/">Blog at WordPress.com.</a></footer>
</body>
</html>"""
