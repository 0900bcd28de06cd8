"""Fixed literature citations, finding messages and alert tags used by the analysis core."""

from app.services.analysis_schemas import Reference


ROME_IV_REFERENCE = Reference(
    title="Rome IV Criteria for Functional Gastrointestinal Disorders",
    authors="Drossman DA et al.",
    journal="Gastroenterology",
    year=2016,
    relevance="Standard diagnostic criteria for IBS.",
)

BRISTOL_TRANSIT_REFERENCE = Reference(
    title="Stool form scale as a useful guide to intestinal transit time",
    authors="Lewis SJ, Heaton KW",
    journal="Scand J Gastroenterol",
    year=1997,
    relevance="Correlates stool form with transit time.",
)


# Finding messages
NO_DATA_FINDING = "No data available for analysis."
ROME_IV_FINDING = "Potential IBS symptoms detected (Rome IV Criteria)."
ANOMALY_FINDING_TEMPLATE = "Irregular stool consistency detected (Variance: {variance:.2f})."
BLEEDING_FINDING = (
    "CRITICAL: Red or Black stool detected. This may indicate bleeding "
    "(Red -> Lower GI, Black/Tarry -> Upper GI). Consult a doctor immediately."
)

# Categorical alert tag raised by the report's rule checks
CUSTOM_ALERT = "custom"


# 7-day alert scan messages
LOW_FREQUENCY_MESSAGE = "Few entries recorded in the last week; possible constipation risk."
HIGH_BRISTOL_MESSAGE = "Recent Bristol types are high; possible diarrhea risk."
CONCERNING_SYMPTOMS_MESSAGE = "Concerning symptoms detected; consider consulting a doctor."
