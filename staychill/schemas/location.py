from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class Language(StrEnum):
    en = "en"
    ar = "ar"


class Highlight(BaseModel):
    model_config = ConfigDict(frozen=True)

    titleEn: str
    titleAr: str
    descriptionEn: str
    descriptionAr: str
    iconName: str | None = None


class Activity(BaseModel):
    model_config = ConfigDict(frozen=True)

    nameEn: str
    nameAr: str
    descriptionEn: str | None = None
    descriptionAr: str | None = None
    iconName: str | None = None


class BestTimeToVisit(BaseModel):
    model_config = ConfigDict(frozen=True)

    seasonsEn: tuple[str, ...] = ()
    seasonsAr: tuple[str, ...] = ()
    notesEn: str | None = None
    notesAr: str | None = None


class Weather(BaseModel):
    model_config = ConfigDict(frozen=True)

    summerTempRange: str
    winterTempRange: str
    rainfallEn: str
    rainfallAr: str


class GettingThere(BaseModel):
    model_config = ConfigDict(frozen=True)

    fromCairoEn: str
    fromCairoAr: str
    fromAlexEn: str | None = None
    fromAlexAr: str | None = None
    nearestAirportEn: str | None = None
    nearestAirportAr: str | None = None


class Neighborhood(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    nameEn: str
    nameAr: str
    descriptionEn: str
    descriptionAr: str
    propertyTypes: tuple[str, ...] = ()


class LocalTip(BaseModel):
    model_config = ConfigDict(frozen=True)

    tipEn: str
    tipAr: str
    categoryEn: str
    categoryAr: str


class MapLocation(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float
    zoomLevel: int | None = None


class LocationRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    nameEn: str
    nameAr: str
    regionEn: str
    regionAr: str
    descriptionEn: str
    descriptionAr: str
    neighborhoods: tuple[Neighborhood, ...] = ()
    images: tuple[str, ...] = ()
    bestTimeToVisit: BestTimeToVisit = BestTimeToVisit()
    highlights: tuple[Highlight, ...] = ()
    activities: tuple[Activity, ...] = ()
    weather: Weather | None = None
    gettingThere: GettingThere | None = None
    localTips: tuple[LocalTip, ...] = ()
    mapLocation: MapLocation | None = None

    def name(self, language: Language) -> str:
        return self.nameAr if language == Language.ar else self.nameEn

    def region(self, language: Language) -> str:
        return self.regionAr if language == Language.ar else self.regionEn

    def description(self, language: Language) -> str:
        return self.descriptionAr if language == Language.ar else self.descriptionEn

    def seasons(self, language: Language) -> tuple[str, ...]:
        if language == Language.ar:
            return self.bestTimeToVisit.seasonsAr
        return self.bestTimeToVisit.seasonsEn
