import pytest

from app.engine import content
from app.engine.criteria import (
    apply_rubric,
    count_action_indicators,
    detect_impact,
    length_notes,
    score_failures,
    score_impact,
    score_language,
    score_recommendations,
    score_structure,
)
from app.engine.marker import (
    build_grid,
    build_tags,
    impact_grid_level,
    impact_tag_level,
    legal_grid_level,
    legal_tag_level,
)
from app.engine.rubric import FAILURE_THEMES, RECOMMENDATION_THEMES
from app.schemas.marking import CriterionLevel, GridStatus, TagStatus


class TestThemes:

    @pytest.mark.parametrize("theme", FAILURE_THEMES, ids=lambda t: t.name)
    def test_each_failure_theme_fires_on_its_first_trigger(self, theme):
        assert theme.matches(f"they ignored {theme.triggers[0]} entirely")
        assert score_failures(theme.triggers[0]).points == 1

    @pytest.mark.parametrize("theme", RECOMMENDATION_THEMES, ids=lambda t: t.name)
    def test_each_recommendation_theme_fires(self, theme):
        assert theme.matches(theme.triggers[-1])

    def test_matching_is_substring_based(self):
        # "discrimin" covers discrimination, discriminatory, ...
        assert score_failures("discriminatory and inaccurate").points == 3


class TestFailures:

    def test_none(self):
        result = score_failures("the garden was green")
        assert (result.points, result.level, result.note) == (
            0, CriterionLevel.MISSING, content.NOTE_FAILURES_NONE,
        )

    def test_one_theme(self):
        result = score_failures("privacy was ignored")
        assert (result.points, result.level, result.note) == (
            1, CriterionLevel.DEVELOPING, content.NOTE_FAILURES_ONE,
        )

    def test_same_theme_twice_counts_once(self):
        assert score_failures("privacy and gdpr and lawful basis").points == 1

    def test_two_themes(self):
        result = score_failures("privacy was ignored and the data was stored badly")
        assert (result.points, result.level, result.note) == (3, CriterionLevel.SECURE, None)


class TestImpact:

    def test_people_harm_and_trust(self):
        result = score_impact(detect_impact("people suffered harm and lost trust"))
        assert (result.points, result.level) == (3, CriterionLevel.SECURE)

    def test_people_harm_and_fairness(self):
        result = score_impact(detect_impact("residents faced discrimination"))
        assert (result.points, result.level) == (3, CriterionLevel.SECURE)

    def test_people_and_harm_only(self):
        result = score_impact(detect_impact("a person experienced stress"))
        assert (result.points, result.level) == (2, CriterionLevel.DEVELOPING)

    def test_trust_only(self):
        result = score_impact(detect_impact("the council lost confidence"))
        assert (result.points, result.level) == (2, CriterionLevel.DEVELOPING)

    def test_fairness_only(self):
        result = score_impact(detect_impact("there were fairness problems"))
        assert (result.points, result.level) == (2, CriterionLevel.DEVELOPING)

    def test_floor_of_one_point(self):
        result = score_impact(detect_impact("the garden was green"))
        assert (result.points, result.level, result.note) == (
            1, CriterionLevel.MISSING, content.NOTE_IMPACT,
        )


class TestRecommendations:

    def test_action_indicators_are_whole_words(self):
        assert count_action_indicators("Actions shoulder musty") == 0
        assert count_action_indicators("We SHOULD act; they must. We need to. I recommend it.") == 4
        assert count_action_indicators("Action 1: retrain. Action 2: audit.") == 2

    def test_two_themes_two_actions(self):
        text = "The council should pilot the system and must add encryption."
        result = score_recommendations(text.lower(), text)
        assert (result.points, result.level, result.note) == (2, CriterionLevel.SECURE, None)

    def test_two_themes_one_action(self):
        text = "The council should pilot the system with encryption."
        result = score_recommendations(text.lower(), text)
        assert (result.points, result.level, result.note) == (
            1, CriterionLevel.DEVELOPING, content.NOTE_RECS_VAGUE,
        )

    def test_no_themes(self):
        text = "The council should do better and must try harder."
        result = score_recommendations(text.lower(), text)
        assert (result.points, result.level, result.note) == (
            0, CriterionLevel.MISSING, content.NOTE_RECS_NONE,
        )


class TestLanguageAndStructure:

    def test_language(self):
        assert score_language(True).points == 1
        missing = score_language(False)
        assert (missing.points, missing.level, missing.note) == (
            0, CriterionLevel.MISSING, content.NOTE_LANGUAGE,
        )

    @pytest.mark.parametrize("text", [
        "failure 1: no notice",
        "part 2) covers impact",
        "why these failures mattered",
    ])
    def test_structure_present(self, text):
        result = score_structure(text)
        assert (result.points, result.level) == (1, CriterionLevel.SECURE)

    def test_structure_absent_reports_developing(self):
        result = score_structure("one long paragraph")
        assert (result.points, result.level, result.note) == (
            0, CriterionLevel.DEVELOPING, content.NOTE_STRUCTURE,
        )

    def test_length_notes(self):
        assert length_notes(60) == [content.NOTE_TOO_SHORT]
        assert length_notes(100) == []
        assert length_notes(250) == []
        assert length_notes(251) == [content.NOTE_TOO_LONG]


class TestDerivations:

    def test_impact_tag_and_grid_can_diverge(self, pad):
        breakdown = apply_rubric(pad("Some people were upset.", 60), 60)

        assert impact_tag_level(breakdown) == CriterionLevel.MISSING
        assert impact_grid_level(breakdown.impact_signals) == CriterionLevel.DEVELOPING

        tags = {tag.name: tag.status for tag in build_tags(breakdown)}
        assert tags["Impact evaluation"] == TagStatus.BAD
        assert build_grid(breakdown).impact == GridStatus.DEVELOPING

    def test_legal_derivations(self, pad):
        with_terms = apply_rubric(pad("privacy", 60), 60)
        without_terms = apply_rubric(pad("", 60), 60)

        assert legal_tag_level(with_terms) == CriterionLevel.SECURE
        assert legal_grid_level(with_terms.uses_terms) == CriterionLevel.SECURE
        assert legal_tag_level(without_terms) == CriterionLevel.MISSING
        assert legal_grid_level(without_terms.uses_terms) == CriterionLevel.MISSING

    def test_ethical_tag_uses_best_of_failures_and_impact(self, pad):
        # impact DEVELOPING (trust), failures MISSING
        breakdown = apply_rubric(pad("public trust fell", 60), 60)
        assert breakdown.failures.level == CriterionLevel.MISSING
        tags = {tag.name: tag.status for tag in build_tags(breakdown)}
        assert tags["Ethical awareness"] == TagStatus.MID
        assert build_grid(breakdown).ethical == GridStatus.MISSING
