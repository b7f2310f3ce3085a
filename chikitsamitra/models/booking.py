import enum


class AppointmentTimeline(str, enum.Enum):
    UPCOMING = "Upcoming"
    PAST = "Past"
