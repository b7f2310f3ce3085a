from pydantic import BaseModel


class HospitalRecord(BaseModel):
    name: str
    state: str = ""
    district: str = ""


class SchemeRecord(BaseModel):
    target_audience: str
    title: str
    description: str = ""

    def to_row(self) -> dict:
        """Sheet-style column names, as served on /api/schemes"""
        return {
            "Target Audience": self.target_audience,
            "Scheme Name": self.title,
            "Description": self.description,
        }


class FaqRecord(BaseModel):
    question: str
    answer: str = ""
