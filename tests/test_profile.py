import unittest
from datetime import date

from factories import make_job
from resume_builder.models.requests import JobRequest
from resume_builder.services.errors import InputValidationError
from resume_builder.services.profile import (
    build_job,
    company_from_link,
    experience_level,
    format_date,
    infer_industry,
    normalize_profile,
)

TODAY = date(2024, 6, 1)


class HelperTests(unittest.TestCase):
    def test_format_date(self):
        self.assertEqual(format_date("2021-03-15"), "03/2021")
        self.assertEqual(format_date("2021-03-15T10:00:00Z"), "03/2021")
        self.assertEqual(format_date("2021-03"), "03/2021")
        self.assertEqual(format_date("Spring term"), "Spring term")
        self.assertEqual(format_date(None), "")

    def test_company_from_link(self):
        self.assertEqual(company_from_link("https://www.acme.com/jobs/1"), "Acme")
        self.assertEqual(company_from_link("https://careers.globex.com/x"), "Globex")
        self.assertEqual(company_from_link("https://example.org"), "")
        self.assertEqual(company_from_link(None), "")

    def test_infer_industry(self):
        self.assertEqual(infer_industry("Hospital clinical staff", ""), "healthcare")
        self.assertEqual(infer_industry("", "Software Developer"), "technology")
        self.assertEqual(infer_industry("Barista", "Coffee"), "general")

    def test_experience_level(self):
        self.assertEqual(experience_level([], TODAY), "entry")
        mid = [{"startDate": "2021-01-01", "endDate": "2024-01-01"}]
        self.assertEqual(experience_level(mid, TODAY), "mid")
        senior = [{"startDate": "2015-01", "current": True}]
        self.assertEqual(experience_level(senior, TODAY), "senior")
        self.assertEqual(experience_level([{"startDate": "n/a"}], TODAY), "entry")


class BuildJobTests(unittest.TestCase):
    def test_requires_description_and_title(self):
        with self.assertRaises(InputValidationError):
            build_job(JobRequest(jobDescription="   ", jobTitle="Engineer"))
        with self.assertRaises(InputValidationError):
            build_job(JobRequest(jobDescription="Build things", jobTitle=""))

    def test_company_resolution(self):
        self.assertEqual(build_job(JobRequest(jobDescription="d", jobTitle="t", companyName="Initech")).company,
                         "Initech")
        self.assertEqual(build_job(JobRequest(jobDescription="d", jobTitle="t",
                                              jobLink="https://jobs.hooli.com/42")).company, "Hooli")
        self.assertEqual(build_job(JobRequest(jobDescription="d", jobTitle="t")).company, "Target Company")


class NormalizeProfileTests(unittest.TestCase):
    def test_requires_name_and_email(self):
        with self.assertRaises(InputValidationError):
            normalize_profile({"fullName": "Jane"}, make_job())
        with self.assertRaises(InputValidationError):
            normalize_profile({"email": "jane@example.com"}, make_job())

    def test_empty_collections_are_fine(self):
        profile = normalize_profile({"fullName": "Jane", "email": "jane@example.com"}, make_job(), TODAY)
        self.assertEqual(profile.workExperience, [])
        self.assertEqual(profile.technicalSkills, [])
        self.assertEqual(profile.tone, "professional")
        self.assertEqual(profile.experienceLevel, "entry")
        self.assertEqual(profile.targetIndustry, "technology")

    def test_alias_keys_are_mapped(self):
        raw = {
            "fullName": "Jane Doe",
            "email": "jane@example.com",
            "socialLinks": {"linkedin": "linkedin.com/in/jane"},
            "preferredTone": "modern",
            "workExperience": [{
                "position": "Engineer",
                "companyName": "Globex",
                "startDate": "2019-02-01",
                "current": True,
                "responsibilities": ["Built APIs", "Ran on-call"],
                "techStack": ["Go"],
            }],
            "education": [{"degree": "BSc", "school": "MIT", "endDate": "2018-06-01", "grade": "A"}],
            "certifications": [{"title": "CKA", "organization": "CNCF", "issueDate": "2022-01-10"}],
            "projects": [{"title": "Bot", "techStack": ["Python"], "githubLink": "https://github.com/j/bot"}],
            "skills": ["Python", {"name": "Kubernetes", "category": "technical"}, {"name": "Sales", "category": "business"}],
            "softSkills": [{"name": "Empathy"}, "Teamwork"],
            "languages": [{"name": "German", "proficiency": "Fluent"}, "English"],
            "achievements": [{"title": "Hackathon winner"}],
        }
        profile = normalize_profile(raw, make_job(), TODAY)

        self.assertEqual(profile.linkedin, "linkedin.com/in/jane")
        self.assertEqual(profile.tone, "modern")
        self.assertEqual(profile.experienceLevel, "senior")
        work = profile.workExperience[0]
        self.assertEqual((work.jobTitle, work.company), ("Engineer", "Globex"))
        self.assertEqual((work.startDate, work.endDate), ("02/2019", "Present"))
        self.assertEqual(work.description, "Built APIs. Ran on-call")
        self.assertEqual(work.technologies, ["Go"])
        self.assertEqual(profile.education[0].institution, "MIT")
        self.assertEqual(profile.education[0].graduationDate, "06/2018")
        self.assertEqual(profile.education[0].gpa, "A")
        self.assertEqual(profile.certifications[0].name, "CKA")
        self.assertEqual(profile.certifications[0].date, "01/2022")
        self.assertEqual(profile.projects[0].link, "https://github.com/j/bot")
        self.assertEqual(profile.technicalSkills, ["Python", "Kubernetes"])
        self.assertEqual(profile.softSkills, ["Empathy", "Teamwork"])
        self.assertEqual(profile.languages, ["German (Fluent)", "English"])
        self.assertEqual(profile.achievements, ["Hackathon winner"])

    def test_non_list_collections_are_ignored(self):
        raw = {
            "fullName": "Jane",
            "email": "jane@example.com",
            "workExperience": 5,
            "education": "MIT",
            "certifications": {"name": "AWS"},
            "projects": None,
            "skills": 5,
            "technicalSkills": 7,
            "softSkills": "Teamwork",
            "languages": 3,
            "achievements": True,
        }
        profile = normalize_profile(raw, make_job(), TODAY)
        self.assertEqual(profile.workExperience, [])
        self.assertEqual(profile.education, [])
        self.assertEqual(profile.certifications, [])
        self.assertEqual(profile.projects, [])
        self.assertEqual(profile.technicalSkills, [])
        self.assertEqual(profile.softSkills, [])
        self.assertEqual(profile.languages, [])
        self.assertEqual(profile.achievements, [])
        self.assertEqual(profile.experienceLevel, "entry")

    def test_explicit_level_and_industry_are_kept(self):
        raw = {"name": "Jane", "email": "j@example.com", "experienceLevel": "Senior", "targetIndustry": "Finance"}
        profile = normalize_profile(raw, make_job(), TODAY)
        self.assertEqual(profile.experienceLevel, "senior")
        self.assertEqual(profile.targetIndustry, "finance")


if __name__ == "__main__":
    unittest.main()
