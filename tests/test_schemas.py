"""
Tests for the wire DTOs and display mappers.
"""

import pytest
from pydantic import ValidationError

from domain.enums import PreferenceLevel
from domain.mappers import WineMapper
from domain.schemas import (
    FavoriteEntry,
    Insights,
    SurveyAnswers,
    UserProfile,
    UserProfileResponse,
    WineDetail,
    WineProfile,
)
from test_constants import SPENCER_PROFILE, SURVEY_ANSWERS, WINE_DETAIL


# =============================================================================
# SURVEY
# =============================================================================


def test_survey_defaults():
    answers = SurveyAnswers.default()

    assert answers.favorite_styles == []
    assert answers.tannin_pref == PreferenceLevel.MEDIUM
    assert answers.acidity_pref == PreferenceLevel.MEDIUM
    assert answers.oak_pref == PreferenceLevel.LOW
    assert answers.adventure_pref == PreferenceLevel.MEDIUM


def test_survey_preferences_are_normalized():
    answers = SurveyAnswers(tannin_pref=" High ", oak_pref="MEDIUM")

    assert answers.tannin_pref == PreferenceLevel.HIGH
    assert answers.oak_pref == PreferenceLevel.MEDIUM


def test_survey_rejects_unknown_preference():
    with pytest.raises(ValidationError):
        SurveyAnswers(tannin_pref="extreme")


def test_survey_serializes_to_wire_values():
    assert SurveyAnswers(**SURVEY_ANSWERS).model_dump(mode="json") == SURVEY_ANSWERS


# =============================================================================
# USER
# =============================================================================


def test_user_profile_response_accepts_wrapper_and_bare_user():
    wrapped = UserProfileResponse.model_validate({"user": SPENCER_PROFILE})
    bare = UserProfileResponse.model_validate(SPENCER_PROFILE)

    assert wrapped == bare
    assert bare.user.user_id == "spencer"


def test_user_profile_optional_collections():
    profile = UserProfile(user_id="new_user")

    assert profile.favorite_wines is None
    assert profile.favorite_wine_ids == []


@pytest.mark.parametrize(
    "wine_id,expected",
    [
        ("chateau_margaux-2015", "Chateau Margaux 2015"),
        ("cloudy_bay_sauvignon_blanc", "Cloudy Bay Sauvignon Blanc"),
        ("opus-one", "Opus One"),
        ("__x__", "X"),
    ],
)
def test_favorite_display_name(wine_id, expected):
    assert FavoriteEntry(wine_id=wine_id).display_name == expected


# =============================================================================
# WINES
# =============================================================================


def test_wine_detail_display_name_prefers_name():
    assert WineDetail(**WINE_DETAIL).display_name == "Château X Grand Vin"
    assert WineDetail(wine_id="opus_one-2018", name="  ").display_name == "Opus One 2018"


@pytest.mark.parametrize(
    "appellation,region,country,expected",
    [
        ("Pauillac", "Bordeaux", "France", "Pauillac · Bordeaux · France"),
        (None, "Marlborough", "New Zealand", "Marlborough · New Zealand"),
        ("", " ", "Italy", "Italy"),
        (None, None, None, ""),
    ],
)
def test_region_line(appellation, region, country, expected):
    assert WineMapper.region_line(appellation, region, country) == expected
    assert (
        WineProfile(appellation=appellation, region=region, country=country).region_line
        == expected
    )


def test_wine_profile_all_fields_optional():
    profile = WineProfile.model_validate({"not_found": True})

    assert profile.not_found is True
    assert profile.resolved_name is None


def test_insights_lists_default_empty():
    insights = Insights(summary="Not enough data yet.")

    assert insights.top_grapes == []
    assert insights.top_vintages == []
