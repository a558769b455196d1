from indiatrails.db.models.difficulty import Difficulty
from indiatrails.db.models.region import Region
from indiatrails.db.models.user import User
from indiatrails.db.models.walk import Walk

__all__ = ["Difficulty", "Region", "User", "Walk"]
