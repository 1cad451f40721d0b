from core.constants import Archetype, PrimaryStat
from pydantic import BaseModel, Field


class RaceDefinition(BaseModel):
    """
    Represents a playable race, including its primary stat and the archetype
    that decides how gear turns into offensive power.
    """

    id: str = Field(
        description="The key players use to reference the race",
    )
    race_name: str = Field(
        description="The display name of the race",
    )
    primary_stat: PrimaryStat = Field(
        description="The base stat the race scales its offense with",
    )
    archetype: Archetype = Field(
        description="The archetype of the race (True Fighter, True Caster or Hybrid)",
    )
    special_case: bool = Field(
        default=False,
        description="Whether pure archetypes scale off VIT instead of the primary stat",
    )

    @property
    def scaling_stat(self) -> PrimaryStat:
        """
        The stat used to scale gear coefficients.

        Returns:
            PrimaryStat:
                VIT for special-case pure archetypes, the primary stat otherwise.

        """
        if self.special_case and self.archetype != Archetype.HYBRID:
            return PrimaryStat.VIT
        return self.primary_stat

    def __hash__(self) -> int:
        """
        Hash the race based on its id.

        Returns:
            int:
                The hash value of the race.

        """
        return hash(self.id)
