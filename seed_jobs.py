"""Seed the jobs table with a handful of approved sample postings.

Usage:
    python seed_jobs.py

Postings are inserted as already approved so they show up on the public
listing straight away. Running it twice inserts the samples twice.
"""
import asyncio
import logging
import os
from datetime import datetime, timedelta, timezone

from dotenv import load_dotenv
from supabase import create_client

from jobboard.adapters.supabase_job_store import SupabaseJobStore
from jobboard.domain.enums import JobStatus

logging.basicConfig(level=logging.INFO,
                    format="%(asctime)s │ %(levelname)-8s │ %(message)s")
logger = logging.getLogger(__name__)

SAMPLE_JOBS = [
    {
        "job_title": "Frontend Developer",
        "company_name": "TechCorp",
        "description": "We are looking for an experienced frontend developer to join our team building modern web applications with React and Next.js.",
        "salary": "$80K - $120K",
        "location": "San Francisco",
        "job_type": "Full-Time",
        "is_featured": True,
        "days_ago": 2,
    },
    {
        "job_title": "UX Designer",
        "company_name": "DesignHub",
        "description": "Join our design team to create beautiful and intuitive user experiences for our products. Experience with Figma required.",
        "salary": "$70K - $100K",
        "location": "Remote",
        "job_type": "Full-Time",
        "is_featured": False,
        "days_ago": 5,
    },
    {
        "job_title": "Backend Engineer",
        "company_name": "DataSystems",
        "description": "Looking for a backend engineer to develop and maintain our server infrastructure and APIs.",
        "salary": "$90K - $130K",
        "location": "New York",
        "job_type": "Full-Time",
        "is_featured": True,
        "days_ago": 1,
    },
    {
        "job_title": "Marketing Intern",
        "company_name": "GrowthMarketing",
        "description": "Summer internship opportunity for marketing students to learn digital marketing strategies and campaign management.",
        "salary": "$20K - $25K",
        "location": "London",
        "job_type": "Internship",
        "is_featured": False,
        "days_ago": 7,
    },
    {
        "job_title": "DevOps Specialist",
        "company_name": "CloudSolutions",
        "description": "Seeking a DevOps engineer to streamline our deployment processes and cloud infrastructure using AWS and Kubernetes.",
        "salary": "$110K - $150K",
        "location": "Remote",
        "job_type": "Contract",
        "is_featured": True,
        "days_ago": 3,
    },
    {
        "job_title": "Product Manager",
        "company_name": "InnovateTech",
        "description": "Lead product development from conception to launch, working with engineering, design, and marketing teams.",
        "salary": "$100K - $140K",
        "location": "San Francisco",
        "job_type": "Full-Time",
        "is_featured": False,
        "days_ago": 10,
    },
]


def build_rows(now: datetime) -> list[dict]:
    rows = []
    for sample in SAMPLE_JOBS:
        row = {k: v for k, v in sample.items() if k != "days_ago"}
        created = (now - timedelta(days=sample["days_ago"])).isoformat()
        row.update(
            status=JobStatus.APPROVED.value,
            contact_email=f"jobs@{sample['company_name'].lower()}.example.com",
            created_at=created,
            updated_at=created,
        )
        rows.append(row)
    return rows


async def main():
    load_dotenv()
    url = os.environ["SUPABASE_URL"]
    key = os.environ["SUPABASE_SERVICE_ROLE_KEY"]
    table = os.environ.get("JOBS_TABLE", "jobs")

    sb = create_client(url, key)
    rows = build_rows(datetime.now(timezone.utc))
    sb.table(table).insert(rows).execute()
    logger.info(f"Inserted {len(rows)} approved sample jobs into '{table}'")

    store = SupabaseJobStore(client_factory=lambda: create_client(url, key), table=table)
    approved = await store.list_approved()
    logger.info(f"Public listing now shows {len(approved)} jobs")


if __name__ == "__main__":
    asyncio.run(main())
