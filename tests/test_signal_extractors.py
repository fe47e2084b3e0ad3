import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.analysis.education import education_fields, extract_education  # noqa: E402
from app.analysis.highlights import extract_experience_highlights  # noqa: E402
from app.analysis.signals import (  # noqa: E402
    ActionVerbHit,
    count_action_verbs,
    detect_sections,
    find_quantifiables,
)


class ActionVerbTests(unittest.TestCase):
    def test_sorted_by_count_descending(self):
        text = "Led team. Developed APIs. Developed tools. Managed budget. Led migration. Led hiring."
        self.assertEqual(
            count_action_verbs(text),
            [
                ActionVerbHit(verb="led", count=3),
                ActionVerbHit(verb="developed", count=2),
                ActionVerbHit(verb="managed", count=1),
            ],
        )

    def test_ties_keep_reference_order(self):
        hits = count_action_verbs("Designed the schema and built the service")
        self.assertEqual([hit.verb for hit in hits], ["built", "designed"])

    def test_whole_words_only(self):
        self.assertEqual(count_action_verbs("misled rebuilt"), [])

    def test_accented_letter_is_a_word_boundary(self):
        self.assertEqual(count_action_verbs("r\u00e9led"), [ActionVerbHit(verb="led", count=1)])

    def test_empty_text(self):
        self.assertEqual(count_action_verbs(""), [])


class SectionDetectionTests(unittest.TestCase):
    def test_sections_found_in_declaration_order(self):
        sections = detect_sections("Skills\nEducation\nWork Experience")
        self.assertEqual(sections.found(), ["experience", "education", "skills"])

    def test_header_synonyms(self):
        sections = detect_sections("About Me\nEmployment\nAcademic\nCompetencies\nPortfolio\nLicenses")
        self.assertTrue(sections.summary)
        self.assertTrue(sections.experience)
        self.assertTrue(sections.education)
        self.assertTrue(sections.skills)
        self.assertTrue(sections.projects)
        self.assertTrue(sections.certifications)
        self.assertFalse(sections.volunteer)

    def test_empty_text_has_no_sections(self):
        self.assertEqual(detect_sections("").found(), [])


class QuantifiableTests(unittest.TestCase):
    def test_all_pattern_families(self):
        text = (
            "Grew revenue 40% to $1,200,000 and $250K in savings over 3 years "
            "with 10+ clients and 2 team members."
        )
        self.assertEqual(
            find_quantifiables(text),
            ["40%", "$1,200,000", "$250K", "3 years", "10+ clients", "2 team members"],
        )

    def test_duplicates_removed(self):
        self.assertEqual(find_quantifiables("Cut costs 40% and churn 40%"), ["40%"])

    def test_non_ascii_digits_are_ignored(self):
        self.assertEqual(find_quantifiables("grew \u0664\u0660% yoy"), [])

    def test_empty_text(self):
        self.assertEqual(find_quantifiables(""), [])


class EducationTests(unittest.TestCase):
    def test_lines_with_degree_or_institution(self):
        text = (
            "EDUCATION\n"
            "• B.Tech in Computer Science, IIT Delhi\n"
            "Stanford University\n"
            "Hobbies: chess"
        )
        self.assertEqual(
            extract_education(text),
            ["B.Tech in Computer Science, IIT Delhi", "Stanford University"],
        )

    def test_inline_degree_phrase_from_long_line(self):
        text = "Summary: " + "word " * 60 + "Bachelor of Arts in History"
        self.assertEqual(extract_education(text), ["Bachelor of Arts in History"])

    def test_capped_at_five(self):
        text = "\n".join(f"Campus {index} University" for index in range(7))
        self.assertEqual(len(extract_education(text)), 5)

    def test_case_insensitive_duplicate_lines(self):
        text = "Stanford University\nSTANFORD UNIVERSITY\nstanford university"
        self.assertEqual(extract_education(text), ["Stanford University"])

    def test_field_keywords_are_reported_separately(self):
        self.assertEqual(
            education_fields("BSc Computer Science and Mathematics"),
            ["computer science", "mathematics"],
        )

    def test_empty_text(self):
        self.assertEqual(extract_education(""), [])


class ExperienceHighlightTests(unittest.TestCase):
    def test_impact_sentence_is_kept(self):
        text = "Increased revenue by 40% and managed a team of 10 people. Enjoys hiking."
        self.assertEqual(
            extract_experience_highlights(text),
            ["Increased revenue by 40% and managed a team of 10 people"],
        )

    def test_short_sentences_are_ignored(self):
        self.assertEqual(extract_experience_highlights("Led team. Saved $5."), [])

    def test_sentences_without_signal_are_ignored(self):
        self.assertEqual(
            extract_experience_highlights("Worked on many interesting things at the company"),
            [],
        )

    def test_non_ascii_digits_are_not_impact(self):
        text = "Ran the support desk for \u0664\u0660 clients across the region"
        self.assertEqual(extract_experience_highlights(text), [])

    def test_capped_at_eight(self):
        text = " ".join(f"Improved pipeline number {index} by a wide margin overall." for index in range(12))
        self.assertEqual(len(extract_experience_highlights(text)), 8)


if __name__ == "__main__":
    unittest.main()
