"""View helpers for a web front end: routes, list items, charts and transaction queries."""