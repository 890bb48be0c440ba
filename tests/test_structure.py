"""
Test suite for noise filtering and structure reconstruction.
"""

import sys
import unittest
from pathlib import Path

# Add the project root to the Python path
sys.path.append(str(Path(__file__).parent.parent))

from resume_analyzer.classifiers import assess_priority, categorize
from resume_analyzer.filters import NoiseFilter, PatternRule, filter_unwanted_content
from resume_analyzer.models import (
    BulletListDocument,
    EnhancedListDocument,
    SectionedDocument,
    TextDocument,
)
from resume_analyzer.structure import StructureReconstructor, group_by_category, is_header, reconstruct


class TestNoiseFilter(unittest.TestCase):
    """Tests for the NoiseFilter class."""

    def test_removes_meta_commentary(self):
        text = (
            "This single line reveals a candidate with real depth\n"
            "- Shipped a billing service used by 2 million customers"
        )
        self.assertEqual(
            filter_unwanted_content(text),
            "- Shipped a billing service used by 2 million customers",
        )

    def test_removes_broken_spacing(self):
        result = filter_unwanted_content("Trained the m od el on production logs every week")
        self.assertNotIn("m od el", result)
        self.assertIn("production logs", result)

    def test_drops_short_lines_but_keeps_bullets_and_headers(self):
        text = "SKILLS:\nok then\n- SQL\nPython and Django for web services"
        result = filter_unwanted_content(text)

        self.assertIn("SKILLS:", result)
        self.assertIn("- SQL", result)
        self.assertNotIn("ok then", result)
        self.assertIn("Python and Django for web services", result)

    def test_mixed_case_lines_survive(self):
        text = "Python developer with many years in fintech"
        self.assertEqual(filter_unwanted_content(text), text)

    def test_remove_rule(self):
        noise_filter = NoiseFilter()
        self.assertTrue(noise_filter.remove_rule("short_line"))
        self.assertNotIn("short_line", noise_filter.rule_names)
        self.assertFalse(noise_filter.remove_rule("short_line"))

        self.assertEqual(noise_filter.filter("ok then"), "ok then")

    def test_add_rule(self):
        noise_filter = NoiseFilter()
        noise_filter.add_rule(PatternRule("confidential", r"^.*CONFIDENTIAL.*$"))

        result = noise_filter.filter(
            "Internal review, CONFIDENTIAL material\n- Managed a budget of 2 million dollars"
        )
        self.assertEqual(result, "- Managed a budget of 2 million dollars")

    def test_custom_rule_list(self):
        noise_filter = NoiseFilter(rules=[])
        self.assertEqual(noise_filter.rule_names, [])
        self.assertEqual(noise_filter.filter("  hi  "), "hi")

    def test_empty_input(self):
        self.assertEqual(filter_unwanted_content(""), "")


class TestClassifiers(unittest.TestCase):
    """Tests for priority and category classification."""

    def test_priority_levels(self):
        self.assertEqual(assess_priority("Improved query latency by 40%"), "high")
        self.assertEqual(assess_priority("Proficient in Kubernetes"), "medium")
        self.assertEqual(assess_priority("Enjoys hiking"), "low")

    def test_classification_is_deterministic(self):
        content = "Led a team of five engineers"
        self.assertEqual(assess_priority(content), assess_priority(content))
        self.assertEqual(categorize(content), categorize(content))

    def test_category_order(self):
        # "years" is checked before "skills"
        self.assertEqual(categorize("Five years of Python skills"), "experience")
        self.assertEqual(categorize("Strong programming skills"), "technical")
        self.assertEqual(categorize("Master's degree in physics"), "education")
        self.assertEqual(categorize("Accomplished every quarterly goal"), "achievement")
        self.assertEqual(categorize("Managed a remote team"), "leadership")
        self.assertEqual(categorize("Enjoys hiking"), "general")


class TestStructureReconstructor(unittest.TestCase):
    """Tests for the StructureReconstructor class."""

    def test_empty_input_placeholder(self):
        self.assertEqual(reconstruct(""), TextDocument("No content available"))
        self.assertEqual(reconstruct(None), TextDocument("No content available"))

    def test_unprocessable_input_placeholder(self):
        document = reconstruct("abc")
        self.assertIsInstance(document, TextDocument)
        self.assertEqual(document.content, "Content could not be processed")

    def test_header_detection(self):
        document = reconstruct("EXPERIENCE:\n- Built system X\n- Led team Y")

        self.assertIsInstance(document, SectionedDocument)
        self.assertEqual(len(document.sections), 1)
        section = document.sections[0]
        self.assertEqual(section.title, "EXPERIENCE")
        self.assertEqual([item.content for item in section.items], ["Built system X", "Led team Y"])
        self.assertTrue(all(item.priority == "high" for item in section.items))

    def test_markdown_and_numbered_headers(self):
        text = (
            "1. STRENGTHS:\n"
            "- **Delivered** a reporting platform ahead of schedule\n"
            "\n"
            "2. WEAKNESSES:\n"
            "- Limited exposure to cloud infrastructure work"
        )
        document = reconstruct(text)

        self.assertIsInstance(document, SectionedDocument)
        self.assertEqual([section.title for section in document.sections], ["STRENGTHS", "WEAKNESSES"])
        first_item = document.sections[0].items[0]
        self.assertEqual(first_item.content, "Delivered a reporting platform ahead of schedule")
        self.assertEqual(first_item.priority, "high")

    def test_lines_before_first_header_are_kept(self):
        text = "Overall this resume shows strong promise.\nSKILLS:\n- Python and Go programming"
        document = reconstruct(text)

        self.assertIsInstance(document, SectionedDocument)
        self.assertEqual([section.title for section in document.sections], ["", "SKILLS"])
        self.assertEqual(
            document.sections[0].items[0].content,
            "Overall this resume shows strong promise.",
        )

    def test_grouping_by_category(self):
        text = (
            "- 5 years experience in backend development\n"
            "- Strong Python and SQL skills\n"
            "- Bachelor's degree in Computer Science"
        )
        document = reconstruct(text)

        self.assertIsInstance(document, EnhancedListDocument)
        self.assertEqual(document.categories, ["experience", "technical", "education"])
        self.assertEqual(
            document.group("technical")[0].content,
            "Strong Python and SQL skills",
        )

    def test_priority_ordering_within_group(self):
        text = (
            "- Assisted with testing for 2 years\n"
            "- Improved performance by 30% over 3 years"
        )
        document = reconstruct(text)

        self.assertIsInstance(document, EnhancedListDocument)
        items = document.group("experience")
        self.assertEqual([item.priority for item in items], ["high", "medium"])
        self.assertEqual(items[0].content, "Improved performance by 30% over 3 years")

    def test_bullet_fallback(self):
        document = reconstruct("Increased revenue through targeted campaigns")

        self.assertIsInstance(document, BulletListDocument)
        self.assertEqual(len(document.items), 1)
        item = document.items[0]
        self.assertEqual(item.content, "Increased revenue through targeted campaigns")
        self.assertEqual(item.priority, "high")
        self.assertEqual(item.category, "achievement")

    def test_to_dict_shapes(self):
        sectioned = reconstruct("EXPERIENCE:\n- Built system X\n- Led team Y").to_dict()
        self.assertEqual(sectioned["type"], "sections")
        self.assertEqual(sectioned["content"][0]["title"], "EXPERIENCE")
        self.assertEqual(sectioned["content"][0]["items"][0], {
            "type": "bullet",
            "content": "Built system X",
            "priority": "high",
        })

        listed = reconstruct(
            "- Assisted with testing for 2 years\n- Improved performance by 30% over 3 years"
        ).to_dict()
        self.assertEqual(listed["type"], "enhanced_list")
        self.assertEqual(list(listed["content"]), ["experience"])
        self.assertEqual(listed["content"]["experience"][0]["type"], "list_item")

    def test_custom_noise_filter(self):
        reconstructor = StructureReconstructor(noise_filter=NoiseFilter(rules=[]))
        document = reconstructor.reconstruct("Go and Rust")

        self.assertIsInstance(document, BulletListDocument)
        self.assertEqual(document.items[0].content, "Go and Rust")

    def test_is_header(self):
        self.assertTrue(is_header("EXPERIENCE:"))
        self.assertTrue(is_header("2. AREAS FOR GROWTH"))
        self.assertFalse(is_header("Experience:"))
        self.assertFalse(is_header("- SKILLS"))

    def test_reconstruct_is_idempotent(self):
        text = (
            "STRENGTHS:\n"
            "- Delivered a reporting platform ahead of schedule\n"
            "Strong communicator with clients and stakeholders across teams\n"
            "\n"
            "WEAKNESSES:\n"
            "- Limited exposure to cloud infrastructure work"
        )
        first = reconstruct(text)
        second = reconstruct(text)

        self.assertEqual(first, second)
        self.assertEqual(first.to_dict(), second.to_dict())

    def test_numbered_items_starting_with_acronyms_are_not_headers(self):
        text = (
            "1. AWS migration for the billing platform\n"
            "2. SQL tuning across the reporting stack"
        )
        self.assertFalse(is_header("1. AWS migration for the billing platform"))

        document = reconstruct(text)
        self.assertIsInstance(document, EnhancedListDocument)
        self.assertEqual(document.categories, ["general"])
        self.assertEqual(
            [item.content for item in document.group("general")],
            ["AWS migration for the billing platform", "SQL tuning across the reporting stack"],
        )

    def test_group_by_category_uses_general_for_descriptions(self):
        reconstructor = StructureReconstructor()
        document = reconstructor.parse_list([
            "- Designed the caching layer",
            "A longer description line",
        ])

        self.assertEqual(document.categories, ["general"])
        self.assertEqual(document.group("general")[0].item_type, "list_item")
        self.assertEqual(document.group("general")[1].item_type, "description")
        self.assertEqual(group_by_category([]), ())


if __name__ == "__main__":
    unittest.main()
