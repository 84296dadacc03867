from db.models.company import Company
from db.models.job import Job
from db.models.user import User, Application

__all__ = ["Company", "Job", "User", "Application"]
