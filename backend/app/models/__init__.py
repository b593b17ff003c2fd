from app.models.tasks import Task
from app.models.team_members import TeamMember
from app.models.uploads import Upload

__all__ = [
    "TeamMember",
    "Task",
    "Upload",
]
