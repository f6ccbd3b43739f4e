"""Static description table for California state departments.

Keys are normalized department names (see ``normalize_key``).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

FALLBACK_DESCRIPTION = "Description not available."
PARKS_MARKER = "parks and recreation"
PARKS_KEY = "california state parks"

DEPARTMENT_DESCRIPTIONS: Mapping[str, str] = MappingProxyType(
    {
        "business, consumer services and housing agency": "Oversees departments and boards that regulate various professions, businesses, financial services, and housing.",
        "government operations agency": "Supports the operations of various departments, boards, and offices within state government.",
        "labor and workforce development agency": "Focuses on ensuring safe and fair workplaces, delivering worker benefits, and promoting employment.",
        "transportation agency": "Plans, develops, and maintains the state's transportation systems, including highways, rail, and aviation.",
        "natural resources agency": "Manages and protects California's natural resources, including forests, water, and wildlife.",
        "environmental protection agency": "Focuses on protecting the environment and public health through environmental regulation and enforcement.",
        "health and human services agency": "Oversees various departments and programs related to health care, social services, and public assistance.",
        "department of corrections and rehabilitation": "Manages the state's prison system and parole operations.",
        "department of education": "Oversees public education in California, from preschool through high school.",
        "department of finance": "Develops and manages the state budget, advises the Governor on fiscal matters.",
        "department of food and agriculture": "Supports and promotes California's agricultural industry.",
        "department of insurance": "Regulates the insurance industry in California.",
        "department of justice": "Enforces laws, prosecutes crimes, and represents the state in legal matters; headed by the Attorney General.",
        "department of motor vehicles": "Issues driver's licenses, registers vehicles, and regulates driving.",
        "department of public health": "Protects and improves public health through disease prevention, health promotion, and emergency preparedness.",
        "franchise tax board": "Administers state income tax laws.",
        "employment development department": "Provides unemployment insurance, disability insurance, and job training services.",
        "department of tax and fee administration": "Administers sales and use taxes, fuel taxes, and other state taxes and fees.",
        "department of fair employment and housing": "Enforces laws prohibiting discrimination and harassment in employment, housing, and public accommodations.",
        "department of social services": "Provides social services, including assistance programs for needy families and individuals.",
        "contractors state license board": "Licenses and regulates contractors in California.",
        "department of human resources": "Oversees the state's human resources functions, including recruitment, training, and employee relations.",
        "department of health care services": "Administers Medi-Cal, California's Medicaid program, and other health care programs.",
        "department of aging": "Advocates for and provides services to older adults and their families.",
        "department of alcohol and drug programs": "Supports substance abuse prevention, treatment, and recovery services.",
        "department of cannabis control": "Regulates the cannabis industry in California.",
        "department of conservation": "Protects and manages California's natural resources, including mineral resources, and geohazards.",
        "department of consumer affairs": "Protects consumers through the licensing and regulation of various professions.",
        "department of financial protection and innovation": "Regulates financial institutions and protects consumers from fraud.",
        "department of forestry and fire protection": "Provides fire protection and management services for California's state-owned lands.",
        "department of housing and community development": "Supports and promotes affordable housing and community development.",
        "department of industrial relations": "Enforces labor laws and regulations, protecting workers' rights and ensuring safe workplaces.",
        "department of managed health care": "Regulates health plans and protects the interests of consumers enrolled in managed care plans.",
        "department of real estate": "Licenses and regulates real estate brokers, agents, and appraisers.",
        "department of rehabilitation": "Assists individuals with disabilities in achieving employment and independent living goals.",
        "department of resources recycling and recovery": "Promotes waste reduction, recycling, and resource recovery.",
        "department of technology": "Provides technology services and solutions to state government agencies.",
        "department of toxic substances control": "Protects public health and the environment from hazardous waste.",
        "department of water resources": "Manages and protects California's water resources.",
        "department of state hospitals": "Provides mental health services to patients admitted into the state hospital system.",
        "california air resources board": "Responsible for coordinating and drafting the state's climate scoping plans and focuses on air quality.",
        "california energy commission": "Sites electricity infrastructure, invests in vehicle-charging infrastructure, and supports efforts to electrify medium and heavy-duty vehicles.",
        "california coastal commission": "Plans and regulates land use along the California coast.",
        "california state parks": "Manages California's state parks and recreational areas.",
        "california state auditor": "Audits state government agencies to ensure accountability and efficiency.",
        "california highway patrol": "Enforces traffic laws and provides law enforcement services on state highways.",
        "california military department": "Oversees the California National Guard and other military activities.",
        "california public utilities commission": "Regulates privately owned public utilities.",
        "california arts council": "Promotes and supports the arts in California.",
        "california state library": "Provides library and information services to the state government and public.",
        "california state lands commission": "Manages state-owned lands and resources.",
        "california student aid commission": "Administers student financial aid programs.",
        "california lottery commission": "Operates the California State Lottery.",
        "california state board of education": "Sets policies and standards for California public schools.",
        "california victim compensation board": "Provides compensation to victims of violent crime.",
        "california commission on disability access": "Promotes accessibility for individuals with disabilities.",
        "office of emergency services": "Coordinates emergency response efforts.",
        "office of the attorney general": "Provides legal representation and enforcement for the state.",
        "california postsecondary education commission": "Provides oversight and planning for California's higher education system.",
        "california fair political practices commission": "Enforces campaign finance and lobbying regulations.",
        "california gambling control commission": "Regulates the gambling industry.",
        "california horse racing board": "Regulates horse racing.",
        "state controller's office": "Acts as the chief fiscal officer of the state, responsible for accountability and disbursement of the state's financial resources.",
        "california emergency medical services authority": "Coordinates and integrates emergency medical services statewide.",
        "governor's office of business and economic development": "Serves as the state's lead entity for economic development and job creation efforts.",
    }
)


def normalize_key(name: str) -> str:
    """Lowercase ``name`` and replace each newline with one space (no collapsing)."""
    return name.lower().replace("\n", " ")


def lookup_description(name: str) -> str:
    key = normalize_key(name)
    if PARKS_MARKER in key:
        key = PARKS_KEY
    return DEPARTMENT_DESCRIPTIONS.get(key, FALLBACK_DESCRIPTION)
