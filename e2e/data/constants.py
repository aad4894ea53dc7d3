"""Static strings shared by page objects, API tests, and assertions."""


class ErrorMessages:
    INVALID_LOGIN = "Invalid username or password"
    NETWORK_ERROR = "Network request failed"
    TIMEOUT = "Request timeout"
    NOT_FOUND = "Page not found"
    SERVER_ERROR = "Internal server error"


class Routes:
    HOME = "/"
    LOGIN = "/login"
    DASHBOARD = "/dashboard"


class ApiEndpoints:
    USERS = "/api/users"


class HomePageTexts:
    HEADER = "Playwright"
