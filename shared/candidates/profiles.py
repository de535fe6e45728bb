"""
Static candidate definitions.

Profiles are built once at import time and never modified afterwards.
"""

from shared.schemas.candidate import CandidateProfile


# ============================================================================
# Front-end developer
# ============================================================================

MAYA_CHEN = CandidateProfile(
    id="maya-chen",
    profession_variant="developer",
    name="Maya Chen",
    email="maya.chen@example.com",
    phone="(416) 555-0142",
    location="Toronto, ON",
    linkedin="linkedin.com/in/maya-chen-dev",
    years_of_experience="7+",
    professional_title="Senior Front-End Developer",
    summary=(
        "Front-End Developer with 7+ years of experience building high-performance, scalable web "
        "applications. Skilled in JavaScript, TypeScript, React, Next.js and Redux, with a strong focus "
        "on responsive, accessible interfaces. Experienced in agile delivery and cross-functional "
        "teamwork, shipping maintainable code with a keen eye for detail."
    ),
    highlights=(
        "Deep experience with Agile delivery, continuous integration and collaborative planning",
        "Advanced React, TypeScript and modern CSS for complex single-page applications",
        "Strong grasp of web standards: cross-browser support, progressive enhancement and responsive design",
        "Designed and consumed REST and GraphQL APIs in production systems",
        "Mentored junior developers and led cross-functional feature teams in enterprise settings",
    ),
    skills={
        "languages": ("JavaScript (ES6+)", "TypeScript", "HTML5", "CSS3", "SQL"),
        "frameworks_libraries": ("React", "Next.js", "Redux", "Node.js", "GraphQL", "REST APIs"),
        "architecture": ("Microfrontends", "Single-Page Applications", "Module Federation", "Component Libraries"),
        "css": ("SASS", "LESS", "Responsive Design", "Cross-Browser Compatibility"),
        "tools": ("Webpack", "Babel", "Git", "GitHub", "npm", "CI/CD Pipelines"),
        "testing": ("Jest", "React Testing Library", "Playwright"),
        "methodologies": ("Agile/Scrum", "Test-Driven Development", "Code Review"),
        "design": ("Figma",),
        "other": ("Web Accessibility (WCAG 2.1)", "Performance Optimization", "Code Splitting", "Lazy Loading"),
    },
    experience=(
        {
            "company": "Northwind Telecom",
            "location": "Mississauga, ON",
            "role": "Senior Front-End Engineer",
            "dates": "Jan 2023 – Present",
            "achievements": (
                "Lead front-end development for a subscription management platform serving millions of customers",
                "Introduced a microfrontend architecture that enabled independent deployment of 5 applications and cut release cycle time by 40%",
                "Built billing integration workflows for multi-partner subscription bundles",
                "Delivered a promotional code management application that raised promotional efficiency by 30%",
                "Rolled out Playwright end-to-end testing, making test runs 40% faster",
                "Mentored 3 junior developers through code reviews and React architecture sessions",
                "Tuned Webpack builds and code splitting to reduce initial bundle size by 35%",
                "Hardened applications against XSS and CSRF in partnership with the security team",
            ),
        },
        {
            "company": "Ontario Revenue Services",
            "location": "Hamilton, ON",
            "role": "Front-End Developer",
            "dates": "Oct 2020 – Dec 2022",
            "achievements": (
                "Delivered secure, accessible tax-service web applications used by millions of residents",
                "Cut bug rates by 30% through unit and integration testing with Jest",
                "Introduced modular components and CI/CD pipelines that sped up deployments",
                "Ran bi-weekly sprint planning, lifting team throughput by 20%",
                "Coordinated with a distributed team across time zones using JIRA and Confluence",
            ),
        },
        {
            "company": "Brightline Consulting",
            "location": "Mississauga, ON",
            "role": "Junior Front-End Developer",
            "dates": "Jan 2018 – Sep 2020",
            "achievements": (
                "Led a responsive redesign that increased mobile engagement by 40%",
                "Raised PageSpeed scores by 35% with image compression, minification and lazy loading",
                "Integrated RESTful APIs with asynchronous data loading to improve interactivity",
            ),
        },
    ),
    education=(
        {"degree": "Diploma in Computer Programming", "institution": "Algonquin College", "location": "Ottawa, ON"},
        {"degree": "Bachelor of Science", "institution": "University of Waterloo", "location": "Waterloo, ON"},
    ),
    key_projects=(
        {
            "name": "Subscription Management Platform",
            "description": "Microfrontend-based platform for managing streaming partner subscriptions",
            "technologies": ("React", "TypeScript", "Module Federation", "GraphQL", "Redux"),
            "impact": "Serves millions of subscribers with 99.9% uptime",
        },
        {
            "name": "Promotional Code Manager",
            "description": "End-to-end tool for creating, distributing and auditing promotional codes",
            "technologies": ("Next.js", "TypeScript", "REST APIs", "Node.js"),
            "impact": "30% increase in promotional efficiency",
        },
    ),
)


# ============================================================================
# Payroll supervisor
# ============================================================================

DANIEL_OKAFOR = CandidateProfile(
    id="daniel-okafor",
    profession_variant="payroll",
    name="Daniel Okafor (PCP)",
    email="daniel.okafor@example.com",
    phone="(905) 555-0178",
    location="Burlington, ON",
    linkedin="",
    years_of_experience="5+",
    professional_title="Payroll Supervisor",
    summary=(
        "Payroll supervisor with 5+ years of experience running and implementing multi-province payroll "
        "systems. Proven leadership on technical payroll projects, system enhancements and regulatory "
        "compliance, working closely with HR, finance and IT."
    ),
    highlights=(
        "Strong understanding of payroll, benefits, compensation and pension operations",
        "Led a national payroll system implementation from design through go-live",
        "Working knowledge of the Income Tax Act, Employment Insurance Act and Canada Pension Plan Act",
        "Maintains internal controls and interprets complex payroll rules with sound judgement",
        "Communicates clearly with senior leadership and frontline staff alike",
    ),
    skills={
        "payroll_systems": ("ADP Workforce Now", "Kronos", "SAP HCM"),
        "hris_applications": ("Workday", "SuccessFactors", "ServiceNow"),
        "legislative_knowledge": ("Income Tax Act", "Employment Insurance Act", "Canada Pension Plan Act", "Employment Standards Act"),
        "software_tools": ("Microsoft Excel (VLOOKUP, Pivot Tables)", "Microsoft Office Suite"),
        "methodologies": ("Lean Six Sigma", "Process Improvement", "Project Planning"),
        "certifications": ("Payroll Compliance Practitioner (PCP)",),
    },
    experience=(
        {
            "company": "Lakeshore Health Network",
            "location": "Oakville, ON",
            "role": "Payroll Supervisor",
            "dates": "Mar 2022 – Present",
            "achievements": (
                "Supervise a team of 6 processing bi-weekly payroll for 4,500 employees",
                "Led the migration from legacy payroll to Workday, completed on schedule with zero missed pay runs",
                "Reduced off-cycle payments by 25% through pre-close audit checklists",
                "Own year-end reconciliation and T4 issuance",
                "Partner with HR and finance on pension remittances and benefits changes",
            ),
        },
        {
            "company": "Greenfield Manufacturing",
            "location": "Hamilton, ON",
            "role": "Senior Payroll Specialist",
            "dates": "Jun 2019 – Feb 2022",
            "achievements": (
                "Processed unionized and salaried payroll across three provinces",
                "Built Excel reconciliation models that shortened month-end close by two days",
                "Resolved escalated pay inquiries within agreed service levels",
                "Documented payroll procedures ahead of an external audit with no findings",
            ),
        },
        {
            "company": "Metro Staffing Group",
            "location": "Toronto, ON",
            "role": "Payroll Administrator",
            "dates": "Aug 2017 – May 2019",
            "achievements": (
                "Prepared weekly payroll for 800 contract workers",
                "Maintained employee master data in ADP",
            ),
        },
    ),
    education=(
        {"degree": "Bachelor of Commerce", "institution": "McMaster University", "location": "Hamilton, ON"},
    ),
)


# ============================================================================
# Governance, risk and compliance analyst
# ============================================================================

PRIYA_RAMAN = CandidateProfile(
    id="priya-raman",
    profession_variant="grc",
    name="Priya Raman",
    email="priya.raman@example.com",
    phone="(587) 555-0119",
    location="Calgary, AB",
    linkedin="linkedin.com/in/priya-raman-grc",
    years_of_experience="8+",
    professional_title="Senior GRC Analyst",
    summary=(
        "Governance, risk and compliance analyst with 8+ years across consulting, financial services and "
        "the public sector. Implements regulatory frameworks, runs risk assessments and audits, and "
        "improves control maturity with hands-on GRC platform experience."
    ),
    highlights=(
        "Implemented and maintained ISO 27001, SOC 2 and NIST CSF programs",
        "Hands-on experience with ServiceNow IRM and IBM OpenPages",
        "Designs and tests internal controls and compliance documentation",
        "Assesses cloud-native, SaaS, PaaS and IaaS environments",
        "Translates technical risk into business impact for executives",
        "Leads audits and remediation across security, engineering and legal teams",
    ),
    skills={
        "frameworks_standards": ("ISO 27001", "SOC 2", "NIST CSF", "PCI DSS", "GDPR"),
        "grc_platforms": ("ServiceNow IRM", "IBM OpenPages"),
        "cloud_security": ("AWS Security Controls", "Azure Policy", "Cloud Control Assessments"),
        "audit_compliance": ("ITGC Testing", "Control Design", "Gap Analysis", "Remediation Planning"),
        "methodologies": ("Risk Assessment", "Third-Party Risk Management"),
        "certifications": ("CISA", "ISO 27001 Lead Implementer"),
    },
    experience=(
        {
            "company": "Province of Alberta",
            "location": "Edmonton, AB",
            "role": "Senior GRC Analyst",
            "dates": "Apr 2021 – Present",
            "achievements": (
                "Led the IBM OpenPages rollout for enterprise risk and policy compliance",
                "Reduced repeat audit findings by 70% through continuous compliance monitoring",
                "Built the third-party risk assessment process covering 200+ vendors",
                "Reported quarterly risk posture to the executive committee",
                "Mapped controls across ISO 27001 and NIST CSF to remove duplicate testing",
            ),
        },
        {
            "company": "Keller & Moss LLP",
            "location": "Calgary, AB",
            "role": "IT Risk Consultant",
            "dates": "Jan 2018 – Mar 2021",
            "achievements": (
                "Ran SOC 2 readiness assessments and guided clients to Type II reports",
                "Tested ITGCs for financial services clients",
                "Assessed cloud environments and recommended mitigating controls",
                "Wrote remediation plans adopted by client leadership",
            ),
        },
        {
            "company": "Prairie Credit Union",
            "location": "Calgary, AB",
            "role": "Compliance Analyst",
            "dates": "Jun 2016 – Dec 2017",
            "achievements": (
                "Maintained the compliance register and policy library",
                "Supported PCI DSS assessments for card processing",
            ),
        },
    ),
    education=(
        {"degree": "Bachelor of Science in Information Systems", "institution": "University of Calgary", "location": "Calgary, AB"},
        {"degree": "Certified Information Systems Auditor (CISA)", "institution": "ISACA"},
    ),
    key_projects=(
        {
            "name": "Enterprise GRC Platform Implementation",
            "description": "Rolled out IBM OpenPages for risk, policy and vendor risk management",
            "technologies": ("IBM OpenPages", "ServiceNow IRM", "Risk Registers"),
            "impact": "70% fewer repeat audit findings",
        },
    ),
)
