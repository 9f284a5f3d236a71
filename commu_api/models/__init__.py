from commu_api.models.health import SERVICE_NAME, STATUS_UP, HealthResponse, utc_timestamp

__all__ = ["HealthResponse", "SERVICE_NAME", "STATUS_UP", "utc_timestamp"]
