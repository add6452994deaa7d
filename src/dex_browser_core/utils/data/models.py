"""
PokeAPI data structures for the JSON payloads consumed by the browser.

This module defines dataclasses that correspond to the subset of the PokeAPI
responses the renderers use. Records are structured from decoded JSON with
dacite (see PokeAPIClient); unknown keys are ignored and no value validation is
performed, the remote payload is trusted as-is.

Records are frozen: a fetched record is never mutated, only replaced.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from dacite import Config, from_dict


# region Shared Resources
@dataclass(frozen=True, slots=True)
class NamedResource:
    """A `{name, url}` reference to another API resource."""

    name: str
    url: str = ""


@dataclass(frozen=True, slots=True)
class ListingEntry:
    """Minimal reference to a Pokemon as returned by the paginated list endpoint.

    The Pokemon's identity is the trailing path segment of `url`
    (e.g. `https://pokeapi.co/api/v2/pokemon/25/` -> 25).
    """

    name: str
    url: str


# endregion


# region Sprite Classes
@dataclass(frozen=True, slots=True)
class OfficialArtwork:
    front_default: Optional[str] = None
    front_shiny: Optional[str] = None


@dataclass(frozen=True, slots=True)
class OtherSprites:
    official_artwork: Optional[OfficialArtwork] = None

    @classmethod
    def from_dict(cls, data: Any) -> Any:
        """Create OtherSprites from the API's `other` mapping.

        The API keys official artwork as `official-artwork`, which cannot be
        expressed as a field name, so the mapping is translated here.

        Args:
            data (Any): The raw `sprites.other` value.

        Returns:
            Any: An OtherSprites instance, or the input unchanged if it is not a dict.
        """
        if not isinstance(data, dict):
            return data

        artwork = data.get("official-artwork")
        if isinstance(artwork, dict):
            artwork = from_dict(data_class=OfficialArtwork, data=artwork, config=DACITE_CONFIG)
        else:
            artwork = None
        return cls(official_artwork=artwork)


@dataclass(frozen=True, slots=True)
class Sprites:
    """Contains URLs to the Pokemon's display images."""

    front_default: Optional[str] = None
    front_shiny: Optional[str] = None
    back_default: Optional[str] = None
    other: Optional[OtherSprites] = None


# endregion


# region Pokemon Classes
@dataclass(frozen=True, slots=True)
class PokemonType:
    type: NamedResource
    slot: int = 1


@dataclass(frozen=True, slots=True)
class PokemonStat:
    stat: NamedResource
    base_stat: int
    effort: int = 0


@dataclass(frozen=True, slots=True)
class PokemonAbility:
    ability: NamedResource
    is_hidden: bool = False
    slot: int = 1


@dataclass(frozen=True, slots=True)
class Pokemon:
    """Full detail record for one Pokemon (e.g., Pikachu).

    `height` is in decimetres and `weight` in hectograms, as the API sends them.
    """

    id: int
    name: str
    height: int = 0
    weight: int = 0
    sprites: Sprites = field(default_factory=Sprites)
    types: list[PokemonType] = field(default_factory=list)
    stats: list[PokemonStat] = field(default_factory=list)
    abilities: list[PokemonAbility] = field(default_factory=list)
    species: Optional[NamedResource] = None


# endregion


# region Species Classes
@dataclass(frozen=True, slots=True)
class FlavorTextEntry:
    flavor_text: str
    language: NamedResource
    version: Optional[NamedResource] = None


@dataclass(frozen=True, slots=True)
class Genus:
    genus: str
    language: NamedResource


@dataclass(frozen=True, slots=True)
class PokemonSpecies:
    """Species-level metadata used to enrich the detail overlay."""

    flavor_text_entries: list[FlavorTextEntry] = field(default_factory=list)
    genera: list[Genus] = field(default_factory=list)


# endregion

# A grid entry is either a bare listing reference or an already-fetched detail record
GridEntry = Union[ListingEntry, Pokemon]

# Dacite configuration for deserialization
DACITE_CONFIG = Config(
    check_types=False,
    type_hooks={
        OtherSprites: OtherSprites.from_dict,
    },
)
