"""One rule engine per entity type over a shared store."""

from ..db.store import EntityStore
from .engine import RuleEngine
from .entities import ENTITIES


class Catalog:
    """The five entity engines, keyed by pattern key."""

    def __init__(self, store: EntityStore):
        self.store = store
        self.engines: dict[str, RuleEngine] = {
            config.key: RuleEngine(config, store) for config in ENTITIES
        }

    @property
    def exercises(self) -> RuleEngine:
        return self.engines["exercise"]

    @property
    def workouts(self) -> RuleEngine:
        return self.engines["workout"]

    @property
    def training_plans(self) -> RuleEngine:
        return self.engines["training.plan"]

    @property
    def muscle_groups(self) -> RuleEngine:
        return self.engines["muscle.group"]

    @property
    def equipment(self) -> RuleEngine:
        return self.engines["equipment"]
