RESUME_STRUCTURE_PROMPT = """
                You are a resume parsing engine. Extract JSON with keys:
                personal{name,email,phone}, education[{school,degree,year}], experience[{company,role,start,end,summary}],
                skills[string[]], links{github,linkedin,portfolio[string[]]}, awards[string[]], projects[{name,description,link}].

                Return **only** a JSON object that strictly matches this schema:
                ${ResumeFormat}
                Return ONLY strict JSON, no markdown formatting.
                No extra text, no Markdown, no backticks—just valid JSON.
                """

RESUME_USER_TEMPLATE = "Resume Text:\n${resumeText}\n---\nExtract the structured JSON now."

json_structure = """
                {
                "personal": { "name": "", "email": "", "phone": "" },
                "education": [
                    { "school": "", "degree": "", "year": "" }
                ],
                "experience": [
                    { "company": "", "role": "", "start": "", "end": "", "summary": "" }
                ],
                "skills": ["Python", "SQL"],
                "links": { "github": "", "linkedin": "", "portfolio": [] },
                "awards": [],
                "projects": [
                    { "name": "", "description": "", "link": "" }
                ]
            }
            """
