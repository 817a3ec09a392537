import json

import pytest

from config import settings
from routers.lists import LOOKUPS
from services.catalog_service import get_catalog


def _load(name):
    return json.loads((settings.data_dir / name).read_text(encoding="utf-8"))


def test_skills_filter_case_insensitive(client):
    resp = client.get("/api/skills", params={"q": "SCRIPT"})
    assert resp.status_code == 200
    assert resp.json() == ["JavaScript", "TypeScript"]


def test_skills_without_query_returns_everything(client):
    assert client.get("/api/skills").json() == _load("skills-en.json")


def test_skills_ar_filters_map_values(client):
    resp = client.get("/api/skillsar", params={"q": "ادارة"})
    assert resp.json() == ["إدارة المشاريع", "إدارة الوقت"]


def test_hobbies_en_and_ar(client):
    assert client.get("/api/hobbies", params={"q": "ing"}).json()[:2] == ["Reading", "Swimming"]
    assert client.get("/api/hobbies-ar", params={"q": "الع"}).json() == [
        "العمل التطوعي",
        "العزف على الجيتار",
        "ألعاب الفيديو",
    ]


def test_specializations_read_nested_list(client):
    assert client.get("/api/specializations", params={"q": "engineering"}).json() == [
        "Software Engineering",
        "Civil Engineering",
        "Mechanical Engineering",
        "Electrical Engineering",
    ]
    assert client.get("/api/specializations/ar", params={"q": "الهندسة"}).json() == [
        "الهندسة المدنية",
        "الهندسة الميكانيكية",
        "الهندسة الكهربائية",
    ]


def test_jobtitles_match_keys_not_ids(client):
    assert client.get("/api/jobtitles", params={"q": "software"}).json() == [
        "Software Engineer",
        "Senior Software Engineer",
    ]
    # keys are titles, values are ids: an id must not match
    assert client.get("/api/jobtitles", params={"q": "1002"}).json() == []


def test_jobtitles_ar_match_values(client):
    assert client.get("/api/jobtitlesar", params={"q": "مهندس"}).json() == [
        "مهندس برمجيات",
        "مهندس برمجيات أول",
        "مهندس مدني",
    ]
    assert client.get("/api/jobtitlesar", params={"q": "1001"}).json() == []


def test_languages_keys_and_values(client):
    assert client.get("/api/languages", params={"q": "an"}).json() == [
        "German",
        "Spanish",
        "Japanese",
        "Russian",
        "Italian",
        "Persian",
        "Korean",
    ]
    assert client.get("/api/languagesar", params={"q": "الانجليزية"}).json() == ["الإنجليزية"]


@pytest.mark.parametrize("path", ["/api/bachelor", "/api/masters", "/api/doctors"])
def test_majors_are_deduplicated(client, path):
    results = client.get(path).json()
    assert results
    assert len(results) == len(set(results))


def test_bachelor_dedup_keeps_first_occurrence_order(client):
    assert client.get("/api/bachelor", params={"q": "computer"}).json() == [
        "Bachelor of Computer Science",
    ]
    assert client.get("/api/bachelor/ar", params={"q": "ادارة"}).json() == [
        "بكالوريوس إدارة الأعمال",
    ]


def test_masters_and_doctors_ar(client):
    assert client.get("/api/masters/ar", params={"q": "إدارة"}).json() == [
        "ماجستير إدارة الأعمال",
        "ماجستير إدارة الهندسة",
    ]
    assert client.get("/api/doctors/ar", params={"q": "الطب"}).json() == ["دكتوراه في الطب"]


def test_results_are_capped(client, monkeypatch):
    monkeypatch.setattr(settings, "result_cap", 3)
    assert client.get("/api/skills").json() == _load("skills-en.json")[:3]
    assert len(client.get("/api/languagesar").json()) == 3


@pytest.mark.parametrize("lookup", LOOKUPS, ids=lambda l: l.path)
def test_every_list_is_an_ordered_subsequence_of_its_table(client, lookup):
    source = lookup.source(get_catalog())
    results = client.get("/api" + lookup.path, params={"q": "a"}).json()
    assert len(results) <= settings.result_cap
    it = iter(source)
    assert all(item in it for item in results)
