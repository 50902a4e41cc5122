# error types shared by the http boundary, config loading and the pipeline


class WeatherError(RuntimeError):
    # base type so callers can catch everything raised by this package
    pass


class ServiceUnavailable(WeatherError):
    # upstream http/network failure or a malformed/incomplete provider response
    pass


class LocationNotFound(WeatherError):
    # geocoding answered fine but had no match, user can respell the query

    def __init__(self, query: str):
        super().__init__(f"No location found for {query!r}")
        self.query = query


class ConfigError(WeatherError):
    pass
