from datetime import date, timedelta
from pathlib import Path

import numpy as np

from intern_tracker.core.internship import VALID_STATUSES, Internship
from intern_tracker.services.book_storage import JsonInternshipBookStorage
from intern_tracker.services.storage import LocalFileSystemStorage

n_internships = 40

rng = np.random.default_rng(seed=7)

companies = ["Acme", "Globex", "Initech", "Hooli", "Umbrella", "Stark Industries", "Wayne Enterprises", "Pied Piper"]
roles = ["Software Engineer Intern", "Data Science Intern", "Product Intern", "SRE Intern", "Design Intern"]

seen = set()
internships = []
while len(internships) < n_internships:
    company = str(rng.choice(companies))
    role = str(rng.choice(roles))
    if (company, role) in seen:
        continue
    seen.add((company, role))
    internships.append(
        Internship(
            company_name=company,
            role=role,
            status=str(rng.choice(VALID_STATUSES)),
            date=date(2024, 1, 1) + timedelta(days=int(rng.integers(0, 180))),
        )
    )

storage = JsonInternshipBookStorage(LocalFileSystemStorage(Path("data")), "internshipbook.json")
storage.save_internship_book(internships)
print("wrote data/internshipbook.json", len(internships))
