import unittest

from resume_analyzer.ai.providers.copilot_provider import TECH_LEVELS, CopilotProvider
from resume_analyzer.ai.providers.heuristics import job_keywords, keyword_overlap
from resume_analyzer.ai.providers.notion_provider import NotionProvider

RESUME = (
    "Experienced backend engineer\n"
    "- Built Python and Node.js services handling 2M requests per day\n"
    "- Reduced AWS costs by 30%\n"
    "- Mentored four engineers\n"
)
JOB = "Seeking Node.js developer with Python, Docker, Kubernetes and AWS. Node.js APIs at scale."


class MockProviderTests(unittest.IsolatedAsyncioTestCase):
    def assert_invariants(self, result):
        for items in (result.strengths, result.improvements, result.skill_gaps, result.recommendations):
            self.assertLessEqual(len(items), 5)
        self.assertGreaterEqual(result.keyword_match, 0)
        self.assertLessEqual(result.keyword_match, 100)
        self.assertTrue(result.summary.strip())

    async def test_both_providers_are_available_and_valid(self):
        for provider in (CopilotProvider(), NotionProvider()):
            self.assertTrue(provider.is_available())
            result = await provider.analyze(RESUME, JOB)
            self.assert_invariants(result)

    async def test_results_are_deterministic(self):
        for provider in (CopilotProvider(), NotionProvider()):
            first = await provider.analyze(RESUME, JOB)
            second = await provider.analyze(RESUME, JOB)
            self.assertEqual(first, second)

    async def test_copilot_reports_a_tech_level(self):
        result = await CopilotProvider().analyze(RESUME, JOB)
        self.assertTrue(any(level in result.summary for level in TECH_LEVELS))

    async def test_skill_gaps_are_job_keywords_missing_from_resume(self):
        result = await NotionProvider().analyze(RESUME, JOB)
        self.assertIn("kubernetes", result.skill_gaps)
        self.assertNotIn("python", result.skill_gaps)

    async def test_tiny_inputs_still_satisfy_invariants(self):
        for provider in (CopilotProvider(), NotionProvider()):
            self.assert_invariants(await provider.analyze("x", "y"))


class HeuristicsTests(unittest.TestCase):
    def test_job_keywords_skip_stopwords_and_short_tokens(self):
        keywords = job_keywords(JOB)
        self.assertEqual(keywords[0], "node.js")
        self.assertNotIn("and", keywords)
        self.assertNotIn("seeking", keywords)

    def test_keyword_overlap_percentage(self):
        matched, missing, percent = keyword_overlap("python docker", "python docker kubernetes terraform")
        self.assertEqual(matched, ["python", "docker"])
        self.assertEqual(missing, ["kubernetes", "terraform"])
        self.assertEqual(percent, 50)

    def test_empty_job_gives_zero(self):
        self.assertEqual(keyword_overlap("python", ""), ([], [], 0))


if __name__ == "__main__":
    unittest.main()
