from typing import Any

from pydantic import BaseModel


class CountryRecord(BaseModel):
    code: str
    name: str
    # university name -> metadata (often empty)
    data: dict[str, Any] | None = None


class CountrySummary(BaseModel):
    code: str
    name: str


class WorldCountry(BaseModel):
    name: str
    cities: list[str] = []


class Organization(BaseModel):
    organization_name: str
    name: list[str] = []


class SpecializationList(BaseModel):
    specializations: list[str] = []


class Catalog(BaseModel):
    """Every bundled reference table, loaded once and treated as read-only."""

    skills_en: list[str] = []
    skills_ar: dict[str, str] = {}
    hobbies_en: list[str] = []
    hobbies_ar: list[str] = []
    specializations_en: SpecializationList = SpecializationList()
    specializations_ar: SpecializationList = SpecializationList()
    job_titles_en: dict[str, str] = {}
    job_titles_ar: dict[str, str] = {}
    languages: dict[str, str] = {}
    majors_bachelor_en: list[str] = []
    majors_bachelor_ar: list[str] = []
    majors_masters_en: list[str] = []
    majors_masters_ar: list[str] = []
    majors_doctors_en: list[str] = []
    majors_doctors_ar: list[str] = []
    countries_en: list[CountryRecord] = []
    countries_ar: list[CountryRecord] = []
    world_countries: list[WorldCountry] = []
    organizations: list[Organization] = []
