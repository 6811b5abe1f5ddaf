"""
SkillMatch - peer skill-exchange matchmaking for student networks.

Scores how well students can teach each other and ranks potential
learning partners.
"""

__app_name__ = "SkillMatch"
__version__ = "0.1.0"
