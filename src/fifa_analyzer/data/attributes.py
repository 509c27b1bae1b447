from typing import Dict, List


## Headline ratings shown on every card, also the default similarity space.
HEADLINE_ATTRIBUTES: List[str] = [
    "pace",
    "shooting",
    "passing",
    "dribbling",
    "defending",
    "physical",
]

DEFAULT_SIMILARITY_ATTRIBUTES = tuple(HEADLINE_ATTRIBUTES)

## Finer-grained in-game stats.
DETAILED_ATTRIBUTES: List[str] = [
    "acceleration",
    "sprint_speed",
    "att_position",
    "finishing",
    "shot_power",
    "long_shots",
    "volleys",
    "penalties",
    "vision",
    "crossing",
    "fk_acc",
    "short_pass",
    "long_pass",
    "curve",
    "agility",
    "balance",
    "reactions",
    "ball_control",
    "dribbling_stat",
    "composure",
    "interceptions",
    "heading_acc",
    "def_aware",
    "stand_tackle",
    "slide_tackle",
    "jumping",
    "stamina",
    "strength",
    "aggression",
]

## Card meta values that are numbers but not in-game stats.
META_NUMERIC_ATTRIBUTES: List[str] = [
    "skills",
    "weak_foot",
    "intl_rep",
    "weight",
]

NUMERIC_ATTRIBUTES: List[str] = (
    HEADLINE_ATTRIBUTES + DETAILED_ATTRIBUTES + META_NUMERIC_ATTRIBUTES
)

## Side-by-side view used when comparing two players in detail.
COMPARISON_DETAIL_ATTRIBUTES: List[str] = [
    "acceleration",
    "sprint_speed",
    "att_position",
    "finishing",
    "shot_power",
    "long_shots",
    "vision",
    "crossing",
    "short_pass",
    "long_pass",
    "agility",
    "balance",
    "reactions",
    "ball_control",
    "interceptions",
    "heading_acc",
    "stamina",
    "strength",
]

## futbin export header --> column name.
## The export carries two "Dribbling" headers; pandas renames the second one
## to "Dribbling.1" and that one is the detailed stat.
CSV_COLUMN_MAP: Dict[str, str] = {
    "ID": "id",
    "Name": "name",
    "Alt POS": "alt_pos",
    "AcceleRATE": "accelerate",
    "Club": "club",
    "Nation": "nation",
    "League": "league",
    "Skills": "skills",
    "Weak Foot": "weak_foot",
    "Intl. Rep": "intl_rep",
    "Foot": "foot",
    "Height": "height",
    "Weight": "weight",
    "Revision": "revision",
    "Age": "age",
    "Club ID": "club_id",
    "League ID": "league_id",
    "Roles": "roles",
    "Playstyles": "playstyles",
    "Pace": "pace",
    "Shooting": "shooting",
    "Passing": "passing",
    "Dribbling": "dribbling",
    "Defending": "defending",
    "Physical": "physical",
    "Acceleration": "acceleration",
    "Sprint Speed": "sprint_speed",
    "Att. Position": "att_position",
    "Finishing": "finishing",
    "Shot Power": "shot_power",
    "Long Shots": "long_shots",
    "Volleys": "volleys",
    "Penalties": "penalties",
    "Vision": "vision",
    "Crossing": "crossing",
    "FK Acc.": "fk_acc",
    "Short Pass": "short_pass",
    "Long Pass": "long_pass",
    "Curve": "curve",
    "Agility": "agility",
    "Balance": "balance",
    "Reactions": "reactions",
    "Ball Control": "ball_control",
    "Dribbling.1": "dribbling_stat",
    "Composure": "composure",
    "Interceptions": "interceptions",
    "Heading Acc.": "heading_acc",
    "Def. Aware": "def_aware",
    "Stand Tackle": "stand_tackle",
    "Slide Tackle": "slide_tackle",
    "Jumping": "jumping",
    "Stamina": "stamina",
    "Strength": "strength",
    "Aggression": "aggression",
}
