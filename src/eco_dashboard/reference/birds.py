"""Alberta bird species and birding sites.

Used by the bird fallback generator so synthetic sightings stay plausible:
real species codes, real places, real coordinates.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ReferenceSpecies:
    """An eBird species with its taxonomy."""

    code: str
    common_name: str
    scientific_name: str
    family: str
    order: str


@dataclass(frozen=True)
class BirdingSite:
    """A named birding location."""

    name: str
    latitude: float
    longitude: float


ALBERTA_BIRDS: tuple[ReferenceSpecies, ...] = (
    ReferenceSpecies("canwar", "Canada Warbler", "Cardellina canadensis", "Parulidae", "Passeriformes"),
    ReferenceSpecies("amerob", "American Robin", "Turdus migratorius", "Turdidae", "Passeriformes"),
    ReferenceSpecies("whtspa", "White-throated Sparrow", "Zonotrichia albicollis", "Passerellidae", "Passeriformes"),
    ReferenceSpecies("mallar3", "Mallard", "Anas platyrhynchos", "Anatidae", "Anseriformes"),
    ReferenceSpecies("cangoo", "Canada Goose", "Branta canadensis", "Anatidae", "Anseriformes"),
    ReferenceSpecies("rethaw", "Red-tailed Hawk", "Buteo jamaicensis", "Accipitridae", "Accipitriformes"),
    ReferenceSpecies("blujay", "Blue Jay", "Cyanocitta cristata", "Corvidae", "Passeriformes"),
    ReferenceSpecies("bkcchi", "Black-capped Chickadee", "Poecile atricapillus", "Paridae", "Passeriformes"),
    ReferenceSpecies("comgra", "Common Grackle", "Quiscalus quiscula", "Icteridae", "Passeriformes"),
    ReferenceSpecies("houfin", "House Finch", "Haemorhous mexicanus", "Fringillidae", "Passeriformes"),
    ReferenceSpecies("amekes", "American Kestrel", "Falco sparverius", "Falconidae", "Falconiformes"),
    ReferenceSpecies("killde", "Killdeer", "Charadrius vociferus", "Charadriidae", "Charadriiformes"),
    ReferenceSpecies("commer", "Common Merganser", "Mergus merganser", "Anatidae", "Anseriformes"),
    ReferenceSpecies("baleag", "Bald Eagle", "Haliaeetus leucocephalus", "Accipitridae", "Accipitriformes"),
    ReferenceSpecies("yelwar", "Yellow Warbler", "Setophaga petechia", "Parulidae", "Passeriformes"),
)

ALBERTA_BIRDING_SITES: tuple[BirdingSite, ...] = (
    BirdingSite("Edmonton River Valley", 53.544, -113.491),
    BirdingSite("Calgary Wetlands", 51.045, -114.058),
    BirdingSite("Red Deer Nature Reserve", 52.268, -113.811),
    BirdingSite("Lethbridge Nature Center", 49.695, -112.833),
    BirdingSite("Fort McMurray Boreal Forest", 56.726, -111.380),
    BirdingSite("Sylvan Lake Bird Sanctuary", 52.321, -114.071),
    BirdingSite("Jasper National Park", 53.917, -118.796),
    BirdingSite("Banff National Park", 51.424, -115.361),
    BirdingSite("Athabasca River Delta", 54.775, -113.284),
    BirdingSite("Chain Lakes Provincial Park", 50.724, -113.974),
    BirdingSite("Grande Prairie Regional Park", 55.154, -118.797),
    BirdingSite("Hinton Wetlands", 52.881, -118.055),
    BirdingSite("Slave Lake Wildlife Area", 53.797, -114.165),
    BirdingSite("Medicine Hat River Valley", 50.041, -110.676),
    BirdingSite("Wood Buffalo National Park", 58.377, -114.016),
)

BIRDS_BY_CODE: dict[str, ReferenceSpecies] = {b.code: b for b in ALBERTA_BIRDS}
