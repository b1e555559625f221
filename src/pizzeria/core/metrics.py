from prometheus_client import Counter

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total number of HTTP requests",
    ["method", "path", "status_code"],
)

PIZZAS_CREATED = Counter(
    "pizzas_created_total",
    "Total number of pizzas created by a store",
    ["style", "pizza_type"],
)

PIZZA_NOT_FOUND = Counter(
    "pizza_not_found_total",
    "Total number of requests for pizza types a store does not offer",
    ["style"],
)
