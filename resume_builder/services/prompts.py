import re
from typing import List

from resume_builder.models.resume import CandidateProfile, JobPosting

DESCRIPTION_LIMIT = 1200
KEYWORD_HINTS = 10

_PLACEHOLDER = re.compile(r"\$\{(\w+)\}")

RESUME_PROMPT = """
                You are a professional resume writer and career coach. Using the information below,
                write a polished, ATS-friendly resume that highlights the candidate's strengths and
                matches the target job as closely as the facts allow.

                Candidate:
                ${candidate}

                Target Role: ${jobTitle}
                Company: ${company}
                Location: ${jobLocation}
                Tone: ${tone}

                Job Description:
                ---
                ${jobDescription}
                ---

                Priority Keywords: ${keywords}

                Work Experience:
                ${workExperience}

                Technical Skills: ${technicalSkills}
                Soft Skills: ${softSkills}

                Education:
                ${education}

                Certifications:
                ${certifications}

                Projects:
                ${projects}

                Languages: ${languages}
                Achievements: ${achievements}

                Instructions:
                - Tailor wording and skills to the job description and weave in the priority keywords.
                - Use concise, achievement-oriented bullet points with measurable impact.
                - Write in a ${tone} style.
                - Use MM/YYYY for every date.
                - Do not invent employers, degrees or certifications the candidate does not have.

                Return **only** a JSON object that strictly matches this schema:
                ${AIResponseFormat}
                No extra text, no Markdown, no backticks, just valid JSON.
                """

json_structure = """
                {
                "summary": "string",
                "workExperience": [
                    {
                        "jobTitle": "string",
                        "company": "string",
                        "startDate": "MM/YYYY",
                        "endDate": "MM/YYYY or Present",
                        "description": "string",
                        "achievements": ["string"],
                        "technologies": ["string"]
                    }
                ],
                "skills": {
                    "technical": ["string"],
                    "soft": ["string"]
                },
                "education": [
                    {
                        "degree": "string",
                        "institution": "string",
                        "graduationDate": "MM/YYYY",
                        "gpa": "string",
                        "relevantCoursework": ["string"]
                    }
                ],
                "certifications": [
                    {
                        "name": "string",
                        "issuer": "string",
                        "date": "MM/YYYY",
                        "expiryDate": "MM/YYYY",
                        "credentialId": "string"
                    }
                ],
                "projects": [
                    {
                        "name": "string",
                        "description": "string",
                        "technologies": ["string"],
                        "link": "string",
                        "achievements": ["string"]
                    }
                ],
                "contactInformation": {
                    "name": "string",
                    "email": "string",
                    "phone": "string",
                    "linkedin": "string"
                },
                "languages": ["string"],
                "achievements": ["string"]
            }
            """


def _join(values: List[str]) -> str:
    return ", ".join(v for v in values if v) or "N/A"


def _candidate_block(candidate: CandidateProfile) -> str:
    return "\n".join([
        f"Full Name: {candidate.name}",
        f"Email: {candidate.email}",
        f"Phone: {candidate.phone or 'N/A'}",
        f"LinkedIn: {candidate.linkedin or 'N/A'}",
        f"Experience Level: {candidate.experienceLevel}",
        f"Target Industry: {candidate.targetIndustry}",
    ])


def _work_block(candidate: CandidateProfile) -> str:
    if not candidate.workExperience:
        return "N/A"
    return "\n".join(
        f"- Job Title: {exp.jobTitle or 'N/A'}\n"
        f"  Company: {exp.company or 'N/A'}\n"
        f"  Dates: {exp.startDate or 'N/A'} - {exp.endDate or 'N/A'}\n"
        f"  Description: {exp.description or 'N/A'}\n"
        f"  Achievements: {_join(exp.achievements)}\n"
        f"  Technologies: {_join(exp.technologies)}"
        for exp in candidate.workExperience
    )


def _education_block(candidate: CandidateProfile) -> str:
    if not candidate.education:
        return "N/A"
    return "\n".join(
        f"- {edu.degree or 'N/A'}, {edu.institution or 'N/A'} ({edu.graduationDate or 'N/A'})"
        + (f", GPA {edu.gpa}" if edu.gpa else "")
        + (f"; Coursework: {_join(edu.relevantCoursework)}" if edu.relevantCoursework else "")
        for edu in candidate.education
    )


def _certification_block(candidate: CandidateProfile) -> str:
    if not candidate.certifications:
        return "N/A"
    return "\n".join(
        f"- {cert.name or 'N/A'}, {cert.issuer or 'N/A'} ({cert.date or 'N/A'})"
        + (f", expires {cert.expiryDate}" if cert.expiryDate else "")
        + (f", ID {cert.credentialId}" if cert.credentialId else "")
        for cert in candidate.certifications
    )


def _project_block(candidate: CandidateProfile) -> str:
    if not candidate.projects:
        return "N/A"
    return "\n".join(
        f"- {project.name or 'N/A'}: {project.description or 'N/A'}\n"
        f"  Technologies: {_join(project.technologies)}\n"
        f"  Link: {project.link or 'N/A'}\n"
        f"  Achievements: {_join(project.achievements)}"
        for project in candidate.projects
    )


def compose_prompt(job: JobPosting, candidate: CandidateProfile, keywords: List[str]) -> str:
    """Build the generation request for one candidate and job.

    The job description is clipped to its first 1200 characters to bound
    the request size; only the top 10 keywords are passed as hints.
    """
    values = {
        "candidate": _candidate_block(candidate),
        "jobTitle": job.title,
        "company": job.company or "N/A",
        "jobLocation": job.location or "N/A",
        "tone": candidate.tone,
        "jobDescription": job.description[:DESCRIPTION_LIMIT],
        "keywords": _join(keywords[:KEYWORD_HINTS]),
        "workExperience": _work_block(candidate),
        "technicalSkills": _join(candidate.technicalSkills),
        "softSkills": _join(candidate.softSkills),
        "education": _education_block(candidate),
        "certifications": _certification_block(candidate),
        "projects": _project_block(candidate),
        "languages": _join(candidate.languages),
        "achievements": _join(candidate.achievements),
        "AIResponseFormat": json_structure,
    }
    return _PLACEHOLDER.sub(lambda match: values[match.group(1)], RESUME_PROMPT)
