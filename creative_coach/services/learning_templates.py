"""
Template data for the learning assistant.

Step headers, personalized subtitles and the keyword-driven fallback paths
used whenever the LLM is unavailable or returns something unusable.
"""

import re
from typing import Any, Optional

from creative_coach.models.learning import (
    AppPredictions,
    LearningModule,
    LearningPath,
    PracticeExercise,
)

SELECT_PATH_TEXT = "Select a path to begin."

STATIC_TITLES = {
    "goal-input": {
        "title": "What do you want to learn?",
        "subtitle": (
            "Describe what you want to learn, upload a project you're working on, or share your goals. "
            "I'll guide you with tailored tutorials, community resources, and inspiration from real creators."
        ),
    },
    "app-prediction": {
        "title": "Based on your goals, these are the apps you should focus on most:",
        "subtitle": "Let me know if this assessment looks accurate for your specific objectives.",
    },
    "learning-paths": {
        "title": "Great! Here are the learning paths I recommend for you.",
        "subtitle": SELECT_PATH_TEXT,
    },
    "learning-paths-predicted": {
        "title": "Great! Here are the learning paths I recommend for you.",
        "subtitle": SELECT_PATH_TEXT,
    },
    "skill-assessment": {
        "title": "Quick Skill Assessment",
        "subtitle": "Help me understand your current skill level to create the perfect learning plan.",
    },
    "learning-paths-manual": {
        "title": "Great! Here are the learning paths I recommend for you.",
        "subtitle": SELECT_PATH_TEXT,
    },
    "revision-input": {
        "title": "Revise Your Learning Plan",
        "subtitle": "Tell me what you'd like to change about your current learning paths.",
    },
}

DEFAULT_PATHS_TITLE = "Great! Here are the learning paths I recommend for you."

APP_DISPLAY_NAMES = {
    "photoshop": "Photoshop",
    "illustrator": "Illustrator",
    "premiere": "Premiere Pro",
    "indesign": "InDesign",
    "lightroom": "Lightroom",
    "acrobat": "Acrobat",
}


def _cap(value: str) -> str:
    return value[:1].upper() + value[1:]


def generate_personalized_subtitle(goals: str, predictions: Optional[AppPredictions], selected_apps: list[str]) -> str:
    """
    Subtitle for the learning-paths step, picked by keyword rules on the goals.
    Always ends with the 'Select a path to begin.' prompt.
    """
    apps_to_learn = predictions.need_help if predictions else selected_apps
    confident_apps = predictions.confident if predictions else []

    if not goals:
        return f"These learning paths are designed to help you achieve your creative goals. \n\n{SELECT_PATH_TEXT}"

    g = goals.lower()
    text = "These learning paths are tailored to "

    if "switch" in g or "transition" in g or "change career" in g:
        if "textile" in g and "graphic" in g:
            text += (
                "support your transition from textile design to graphic design.\n\nSince you already have creative "
                "expertise, these paths are designed to build on your design strengths while introducing the key "
                "digital skills and workflows you'll need in your new role."
            )
        elif "print" in g and "digital" in g:
            text += (
                "help you transition from print to digital design. Your existing design foundation will be valuable "
                "as we focus on digital tools and workflows that complement your creative experience."
            )
        elif "photography" in g and ("video" in g or "motion" in g):
            text += (
                "support your expansion from photography into video and motion graphics. Your visual storytelling "
                "skills will translate well as we introduce video editing and motion design techniques."
            )
        else:
            from_match = re.search(r"from\s+(\w+(?:\s+\w+)?)", g)
            to_match = re.search(r"to\s+(\w+(?:\s+\w+)?)", g)
            if from_match and to_match:
                text += (
                    f"support your transition from {from_match.group(1)} to {to_match.group(1)}. Your existing "
                    "creative background provides a strong foundation as we focus on the specific skills and "
                    "workflows you'll need for this career change."
                )
            else:
                text += (
                    "support your career transition. Your creative background will be valuable as we introduce "
                    "new skills and workflows tailored to your goals."
                )
    elif "beginner" in g or "new to" in g or "just starting" in g:
        text += (
            "introduce you to Adobe's creative tools. As a beginner, these paths start with fundamentals and "
            "gradually build your skills through hands-on practice and real projects."
        )
    elif "improve" in g or "advance" in g or "next level" in g:
        if confident_apps:
            text += (
                "build on your existing Adobe experience and take your skills to the next level. Since you already "
                f"have experience with {' and '.join(confident_apps)}, these paths focus on advanced techniques and "
                "professional workflows."
            )
        else:
            text += (
                "help you advance your creative skills. These paths focus on professional techniques and workflows "
                "to elevate your work."
            )
    elif "business" in g or "startup" in g or "entrepreneur" in g:
        text += (
            "equip you with the creative skills needed for your business goals. These paths focus on practical "
            "design skills that entrepreneurs and business owners need most."
        )
    elif "freelance" in g or "client work" in g:
        text += (
            "prepare you for freelance success. These paths cover both creative skills and professional workflows "
            "that client work demands."
        )
    elif "portfolio" in g or "showcase" in g:
        text += (
            "help you build a strong creative portfolio. These paths focus on creating compelling work that "
            "showcases your abilities and attracts opportunities."
        )
    elif apps_to_learn:
        app_names = " and ".join(APP_DISPLAY_NAMES.get(app, app) for app in apps_to_learn)
        text += (
            f"help you master {app_names} to achieve your creative goals. These paths are structured to build "
            "skills progressively while working on projects relevant to your interests."
        )
    else:
        text += (
            "help you achieve your creative goals. These paths are designed to build skills progressively through "
            "hands-on practice and real projects."
        )

    return f"{text}\n\n{SELECT_PATH_TEXT}"


def fallback_prediction(goals: str) -> AppPredictions:
    """Keyword guess at the apps a goal needs; Photoshop and Illustrator when nothing matches."""
    g = goals.lower()
    need_help: list[str] = []

    if "photo" in g or "image" in g or "social media" in g:
        need_help.append("photoshop")
        if "professional" in g or "photography" in g:
            need_help.append("lightroom")
    if any(word in g for word in ("logo", "design", "vector", "brand")):
        need_help.append("illustrator")
    if any(word in g for word in ("video", "youtube", "content", "film")):
        need_help.append("premiere")
    if "web" in g or "ui" in g or "ux" in g:
        need_help += ["illustrator", "photoshop"]

    if not need_help:
        need_help = ["photoshop", "illustrator"]

    return AppPredictions(
        confident=[],
        need_help=need_help,
        reasoning=f'Based on your "{goals}" goal, these Adobe apps will be most relevant for achieving your objectives.',
    )


def _detect_transition(goals: str) -> tuple[str, str, str]:
    """(user background, target field, transition type) from the goal text."""
    g = goals.lower()
    if "textile" in g and "graphic" in g:
        return "textile designer", "graphic design", "career transition"
    if "photography" in g and "video" in g:
        return "photographer", "video production", "medium expansion"
    if "restaurant" in g or "food" in g:
        return "restaurant owner", "marketing design", "business development"
    if "marketing" in g and "business" in g:
        return "business professional", "marketing design", "skill acquisition"
    if "social media" in g or "content" in g:
        return "content creator", "social media design", "platform expansion"
    if "freelance" in g or "client" in g:
        return "aspiring freelancer", "client services", "business launch"
    if "career" in g and "change" in g:
        return "career changer", "creative field", "career transition"
    return "creative professional", "digital design", "skill development"


def create_structured_fallback_paths(goals: str, apps_to_learn: list[str]) -> list[LearningPath]:
    """
    Two template paths (foundation, then professional portfolio) shaped
    around the background and target field detected in the goals.
    """
    primary_app = apps_to_learn[0] if apps_to_learn else "photoshop"
    secondary_app = apps_to_learn[1] if len(apps_to_learn) > 1 else "illustrator"
    background, target, transition = _detect_transition(goals)

    generic = background == "creative professional"
    background_plural = "Creative Professionals" if generic else f"{_cap(background)}s"
    background_short = "Creative" if generic else _cap(background)
    target_title = _cap(target)

    foundation = LearningPath(
        id=1,
        title=f"{target_title} Foundations for {background_plural}",
        description=(
            f"Master essential {target} fundamentals designed specifically for {background}s making the transition. "
            "Build on your existing creative knowledge while learning industry-standard techniques."
        ),
        level="Beginner",
        duration="4-6 weeks",
        time_commitment="1hour/day",
        focus="Foundation Building for Career Transition",
        apps=[primary_app],
        personalized_reason=(
            f"This path recognizes your {background} background and builds {target} skills in a way that leverages "
            "your existing creative understanding and industry knowledge."
        ),
        goal_connection=(
            f"Provides the essential foundation needed for {background}s to successfully transition into {target} "
            "with confidence and competence."
        ),
        modules=[
            LearningModule(
                id=1,
                title=f"{_cap(primary_app)} Interface for {_cap(background)}s",
                description=(
                    f"Learn {primary_app} interface and tools with context specifically relevant to {background}s "
                    f"transitioning to {target}. Understand how your existing creative knowledge applies."
                ),
                duration="1-2 weeks",
                difficulty="beginner",
                objectives=[
                    f"Navigate {primary_app} with efficiency relevant to {target} work",
                    f"Apply {background} design principles in digital {target} context",
                    f"Set up workflows that bridge {background} and {target} methodologies",
                ],
                practice_exercises=[
                    PracticeExercise(
                        title=f"{_cap(background)} to {target_title} Translation Project",
                        description=(
                            f"Create a {primary_app} project that demonstrates how your {background} sensibilities "
                            f"translate to effective {target} work"
                        ),
                        estimated_time="3-4 hours",
                        deliverable=(
                            f"Portfolio piece showing successful transition from {background} aesthetic to {target} standards"
                        ),
                    )
                ],
            ),
            LearningModule(
                id=2,
                title=f"Core {target_title} Principles for Career Changers",
                description=(
                    f"Master fundamental {target} concepts and techniques, with specific focus on how they differ "
                    f"from and build upon {background} practices you already know."
                ),
                duration="2-3 weeks",
                difficulty="beginner",
                objectives=[
                    f"Understand {target} industry standards and best practices",
                    f"Apply color, typography, and composition principles specific to {target}",
                    f"Create professional-quality work that meets {target} industry expectations",
                ],
                practice_exercises=[
                    PracticeExercise(
                        title=f"Professional {target_title} Standards Project",
                        description=(
                            f"Create a comprehensive project that demonstrates mastery of {target} principles and "
                            "professional standards for your new career path"
                        ),
                        estimated_time="4-6 hours",
                        deliverable=f"Professional-quality {target} project ready for portfolio inclusion",
                    )
                ],
            ),
        ],
    )

    professional = LearningPath(
        id=2,
        title=(
            f"Building a {target_title} {'Career' if transition == 'career transition' else 'Portfolio'} "
            f"from {background_short} Background"
        ),
        description=(
            "Develop a compelling professional portfolio and positioning strategy that showcases your successful "
            f"transition from {background} to {target}, emphasizing your unique value proposition."
        ),
        level="Intermediate",
        duration="6-8 weeks",
        time_commitment="1.5hours/day",
        focus="Professional Portfolio and Career Positioning",
        apps=apps_to_learn[:2] if len(apps_to_learn) > 1 else [primary_app, secondary_app],
        personalized_reason=(
            f"This path addresses the specific challenges {background}s face when positioning themselves "
            f"professionally in {target}, turning your background into a competitive advantage."
        ),
        goal_connection=(
            f"Establishes you as a distinctive {target} professional whose {background} background provides unique "
            "value and perspective in the marketplace."
        ),
        modules=[
            LearningModule(
                id=1,
                title=f"Portfolio Strategy for {_cap(background)} to {target_title} Transition",
                description=(
                    "Develop a strategic approach to portfolio creation that tells your compelling transition story "
                    f"and positions your {background} background as an asset in {target}."
                ),
                duration="3-4 weeks",
                difficulty="intermediate",
                objectives=[
                    "Create a portfolio narrative that positions your career transition as a strength",
                    f"Develop signature pieces that showcase {background}-informed {target} excellence",
                    f"Build a professional brand that differentiates you in the {target} market",
                ],
                practice_exercises=[
                    PracticeExercise(
                        title=f"Professional {target_title} Portfolio Development",
                        description=(
                            f"Create a complete professional portfolio that demonstrates your successful mastery of "
                            f"{target} while highlighting the unique value your {background} background provides"
                        ),
                        estimated_time="8-10 hours",
                        deliverable=(
                            f"Professional portfolio ready for {target} career launch, positioning your transition "
                            "as a competitive advantage"
                        ),
                    )
                ],
            )
        ],
    )

    return [foundation, professional]


# Standard module sets attached to LLM-generated paths

_PERSONAL_BRANDING_EXERCISE = PracticeExercise(
    title="Personal Branding Project",
    description=(
        "Create a complete personal branding package that reflects your professional transition, including logo, "
        "business cards, and letterhead."
    ),
    estimated_time="4-6 hours",
    deliverable="Professional personal brand identity that bridges your previous career with your design goals",
)

_INDUSTRY_REDESIGN_EXERCISE = PracticeExercise(
    title="Industry Redesign Challenge",
    description=(
        "Choose a piece of marketing material from your previous industry and redesign it using graphic design "
        "principles and your new software skills."
    ),
    estimated_time="3-4 hours",
    deliverable="Before/after comparison showing improved design with explanation of design decisions",
)


def _textile_to_graphic_modules() -> list[LearningModule]:
    return [
        LearningModule(
            id=1,
            title="Translating Textile Skills into Digital Design",
            description=(
                "Learn how to apply your textile design intuition to graphic design. Understand the parallels "
                "between textile and graphic design principles."
            ),
            duration="2 weeks",
            difficulty="beginner",
            objectives=[
                "Identify and translate textile design principles (texture, repetition, pattern) into digital compositions",
                "Create a digital mood board that reflects the essence of a textile-based collection",
                "Use Photoshop to reimagine physical textile elements into layered digital collages",
                "Understand how textile aesthetics can inform branding and visual storytelling",
            ],
            key_advice=[
                "Think of patterns as branding elements",
                "Use your understanding of texture and repetition to create compelling visual compositions",
                "Treat fabric swatches like digital mood boards",
            ],
            project_ideas=[
                "Create a digital mood board using Photoshop that reflects your textile-inspired brand concept",
                "Reinterpret a physical textile collection into a digital collage using Photoshop layers and blending modes",
            ],
            practice_exercises=[
                PracticeExercise(
                    title="Digital Textile Mood Board Creation",
                    description=(
                        "Create a digital mood board using Photoshop that reflects your textile-inspired brand "
                        "concept, incorporating color stories, texture references, and pattern elements."
                    ),
                    estimated_time="3-4 hours",
                    deliverable="Professional mood board showcasing textile-to-digital design thinking",
                ),
                PracticeExercise(
                    title="Pattern Digitization Project",
                    description=(
                        "Take one of your existing textile designs and recreate it digitally using Photoshop layers "
                        "and blending modes to simulate fabric textures."
                    ),
                    estimated_time="4-5 hours",
                    deliverable="Digital pattern that maintains the essence of the original textile design",
                ),
            ],
        ),
        LearningModule(
            id=2,
            title="Surface Design for Branding and Packaging",
            description=(
                "Apply your surface design skills to branding, packaging, and product design, key areas in "
                "graphic design."
            ),
            duration="3 weeks",
            difficulty="intermediate",
            objectives=[
                "Design and edit seamless patterns using Adobe Illustrator",
                "Apply surface design principles to branding assets such as packaging and stationery",
                "Use Photoshop smart objects and Illustrator tools to create realistic product mockups",
                "Evaluate how pattern design enhances brand identity and consumer experience",
            ],
            key_advice=[
                "Think about how patterns can enhance brand identity",
                "Use mockups to visualize your designs on products like stationery, apparel, or packaging",
            ],
            project_ideas=[
                "Create a brand identity for a fictional product using your textile-inspired patterns",
                "Apply your designs to packaging mockups using Photoshop smart objects and Illustrator outlines",
            ],
            practice_exercises=[
                PracticeExercise(
                    title="Brand Pattern System Development",
                    description=(
                        "Create a cohesive pattern family for a fictional sustainable fashion brand, including "
                        "business cards, packaging, and stationery applications."
                    ),
                    estimated_time="6-8 hours",
                    deliverable="Complete brand identity system with pattern applications across multiple touchpoints",
                ),
                PracticeExercise(
                    title="Product Packaging Design",
                    description=(
                        "Design packaging for a beauty or lifestyle product that incorporates your textile-inspired "
                        "patterns using smart objects and realistic mockups."
                    ),
                    estimated_time="5-6 hours",
                    deliverable="Professional packaging design with pattern integration and brand storytelling",
                ),
            ],
        ),
        LearningModule(
            id=3,
            title="Building Your Transition Portfolio",
            description=(
                "Create a professional portfolio that showcases your unique textile-to-graphic design perspective "
                "and attracts opportunities."
            ),
            duration="3 weeks",
            difficulty="intermediate",
            objectives=[
                "Develop 5-7 portfolio pieces that demonstrate your textile design background applied to graphic design",
                "Create case studies that tell the story of your design process and creative thinking",
                "Present your work using Adobe Portfolio and InDesign layouts",
                "Network with graphic design professionals and get feedback on your transition portfolio",
            ],
            key_advice=[
                "Highlight your unique perspective as a textile designer entering graphic design",
                "Show before/after examples of how you've adapted textile concepts to digital applications",
                "Include personal projects that demonstrate passion for your new field",
            ],
            project_ideas=[
                "Create a textile-inspired branding system for a sustainable fashion startup",
                "Design a series of album covers that incorporate your textile design aesthetic",
            ],
            practice_exercises=[
                PracticeExercise(
                    title="Transition Portfolio Case Study",
                    description=(
                        "Document your design process for one major project, showing how you applied textile design "
                        "thinking to solve a graphic design challenge."
                    ),
                    estimated_time="4-5 hours",
                    deliverable="Professional case study presentation with process documentation and final outcomes",
                ),
                PracticeExercise(
                    title="Portfolio Website Development",
                    description=(
                        "Create a professional portfolio website using Adobe Portfolio that tells your transition "
                        "story and showcases your unique design perspective."
                    ),
                    estimated_time="6-8 hours",
                    deliverable="Live portfolio website optimized for both desktop and mobile viewing",
                ),
            ],
        ),
    ]


def _career_change_modules(primary_app: str) -> list[LearningModule]:
    return [
        LearningModule(
            id=1,
            title=f"{_cap(primary_app)} Fundamentals for Career Changers",
            description=(
                f"Master essential {primary_app} skills while leveraging your existing professional experience and "
                "transferable skills."
            ),
            duration="2-3 weeks",
            difficulty="beginner",
            objectives=[
                f"Master {primary_app} interface and essential tools",
                "Create your first professional-quality design projects",
                "Understand design principles and how they apply to your career goals",
                "Build confidence transitioning from your previous field",
            ],
            key_advice=[
                "Draw connections between your previous work and design principles",
                "Start with projects that interest you personally to build motivation",
                "Don't be afraid to experiment and make mistakes while learning",
            ],
            project_ideas=[
                "Create a personal branding package that reflects your professional transition",
                "Redesign materials from your previous career using graphic design principles",
            ],
            practice_exercises=[_PERSONAL_BRANDING_EXERCISE, _INDUSTRY_REDESIGN_EXERCISE],
        ),
        LearningModule(
            id=2,
            title="Professional Design Applications",
            description=(
                "Apply your new design skills to real-world projects that demonstrate your capabilities to "
                "potential employers or clients."
            ),
            duration="3-4 weeks",
            difficulty="intermediate",
            objectives=[
                "Create designs for multiple industries and applications",
                "Develop a consistent design style and approach",
                "Learn client communication and project management basics",
                "Build a portfolio that showcases your range and capabilities",
            ],
            key_advice=[
                "Focus on industries you understand from your previous career",
                "Create diverse projects to show your adaptability",
                "Get feedback from working designers and iterate on your work",
            ],
            project_ideas=[
                "Design marketing materials for businesses in your former industry",
                "Create a complete brand identity for a fictional company in a field you're passionate about",
            ],
            practice_exercises=[
                PracticeExercise(
                    title="Multi-Industry Design Portfolio",
                    description=(
                        "Create marketing materials for three different industries, demonstrating your ability to "
                        "adapt your design style to different contexts and audiences."
                    ),
                    estimated_time="8-10 hours",
                    deliverable="Portfolio of diverse design applications showing range and adaptability",
                ),
                PracticeExercise(
                    title="Client Project Simulation",
                    description=(
                        "Complete a full design project from brief to final delivery, including client presentations "
                        "and revisions, for a fictional client in your target industry."
                    ),
                    estimated_time="6-8 hours",
                    deliverable="Complete project documentation including brief, concepts, revisions, and final deliverables",
                ),
            ],
        ),
        LearningModule(
            id=3,
            title="Launching Your Design Career",
            description=(
                "Prepare for job hunting, freelancing, or starting your own design business with professional "
                "portfolio and business skills."
            ),
            duration="2-3 weeks",
            difficulty="intermediate",
            objectives=[
                "Complete a professional portfolio website",
                "Prepare for design interviews and presentations",
                "Understand freelance vs agency vs in-house career paths",
                "Network within the design community and start building relationships",
            ],
            key_advice=[
                "Your unique background is an asset - don't hide it, highlight it",
                "Start networking before you feel 'ready' - the design community is welcoming",
                "Consider starting with freelance projects to build experience and confidence",
            ],
            project_ideas=[
                "Create a case study presentation for your best portfolio piece",
                "Design your own business cards and promotional materials",
            ],
            practice_exercises=[
                PracticeExercise(
                    title="Portfolio Presentation Development",
                    description=(
                        "Create a compelling case study presentation for your strongest portfolio piece, including "
                        "process documentation and design rationale."
                    ),
                    estimated_time="4-5 hours",
                    deliverable="Professional presentation ready for interviews or client meetings",
                ),
                PracticeExercise(
                    title="Professional Materials Design",
                    description=(
                        "Design your own business cards, resume, and promotional materials that reflect your unique "
                        "background and design aesthetic."
                    ),
                    estimated_time="3-4 hours",
                    deliverable="Complete set of professional materials for networking and job searching",
                ),
            ],
        ),
    ]


def _skill_building_modules(primary_app: str, is_foundation: bool) -> list[LearningModule]:
    if is_foundation:
        objectives = ["Master interface and basic tools", "Create first portfolio pieces", "Build confidence with new software"]
        project_ideas = [
            "Create a simple poster for an event you're interested in",
            "Design social media graphics for a hobby or interest",
        ]
    else:
        objectives = ["Execute professional projects", "Develop signature style", "Build career portfolio"]
        project_ideas = [
            "Develop a complete brand identity for a fictional company",
            "Create a series of designs that showcase your unique style",
        ]

    return [
        LearningModule(
            id=1,
            title=f"{_cap(primary_app)} Fundamentals",
            description=(
                "Master essential tools and workflows for your creative goals"
                if is_foundation
                else "Develop advanced techniques and professional workflows"
            ),
            duration="2 weeks" if is_foundation else "3 weeks",
            difficulty="beginner" if is_foundation else "intermediate",
            objectives=objectives,
            key_advice=[
                "Practice consistently, even if just 15 minutes a day",
                "Focus on understanding principles, not just following tutorials",
                "Save and organize all your practice work - you'll be surprised how much you improve",
            ],
            project_ideas=project_ideas,
            practice_exercises=[_PERSONAL_BRANDING_EXERCISE, _INDUSTRY_REDESIGN_EXERCISE],
        ),
        LearningModule(
            id=2,
            title="Creative Project Development",
            description="Apply your skills to meaningful projects that reflect your creative interests and goals",
            duration="3-4 weeks",
            difficulty="intermediate",
            objectives=[
                "Plan and execute complete creative projects from concept to completion",
                "Develop your unique creative voice and style",
                "Learn to present and discuss your creative work professionally",
                "Build a portfolio that represents your creative goals",
            ],
            key_advice=[
                "Choose projects you're genuinely excited about",
                "Don't be afraid to iterate and revise your work",
                "Seek feedback early and often in the creative process",
            ],
            project_ideas=[
                "Create a passion project that combines your interests with your new design skills",
                "Collaborate with friends or local organizations on real design challenges",
            ],
            practice_exercises=[
                PracticeExercise(
                    title="Passion Project Development",
                    description=(
                        "Choose a cause, hobby, or interest you're passionate about and create a complete visual "
                        "identity or campaign for it."
                    ),
                    estimated_time="8-10 hours",
                    deliverable="Complete project portfolio piece with documented creative process and final deliverables",
                ),
                PracticeExercise(
                    title="Real-World Design Challenge",
                    description=(
                        "Partner with a local business, nonprofit, or community organization to solve an actual "
                        "design need they have."
                    ),
                    estimated_time="10-12 hours",
                    deliverable="Professional client work with testimonial and case study documentation",
                ),
            ],
        ),
    ]


def add_standard_modules(basic_path: dict[str, Any], index: int, apps_to_learn: list[str], goals: str) -> LearningPath:
    """
    Complete an LLM-generated path outline with level, duration, apps and modules.

    Args:
        basic_path: {id, title, description, personalizedReason, goalConnection} from the LLM
        index: Position of the path; the first one is the foundation path
        apps_to_learn: Apps the user needs help with
        goals: The user's goal text

    Returns:
        LearningPath
    """
    g = goals.lower()
    is_foundation = index == 0
    if index < len(apps_to_learn):
        primary_app = apps_to_learn[index]
    else:
        primary_app = apps_to_learn[0] if apps_to_learn else "photoshop"
    secondary_app = apps_to_learn[1] if len(apps_to_learn) > 1 else "illustrator"

    is_textile_to_graphic = "textile" in g and "graphic" in g
    is_career_transition = "transition" in g or "career change" in g or "switch" in g
    is_to_graphic_design = "graphic design" in g

    if is_textile_to_graphic:
        modules = _textile_to_graphic_modules()
        duration, time_commitment, focus = "8-10 weeks", "1.5-2 hours/day", "Textile to Graphic Design Transition"
    elif is_career_transition and is_to_graphic_design:
        modules = _career_change_modules(primary_app)
        duration, time_commitment, focus = "6-8 weeks", "1-1.5 hours/day", "Career Transition"
    else:
        modules = _skill_building_modules(primary_app, is_foundation)
        if is_career_transition:
            duration, focus = "6-8 weeks", "Career Transition"
        else:
            duration, focus = "4-6 weeks", "Creative Skill Building"
        time_commitment = "1-1.5 hours/day"

    path = LearningPath.model_validate({"id": index + 1, "title": "", **basic_path})
    return path.model_copy(
        update={
            "level": "Beginner" if is_foundation else "Intermediate",
            "duration": duration,
            "time_commitment": time_commitment,
            "focus": focus,
            "apps": [primary_app] if is_foundation else [primary_app, secondary_app],
            "modules": modules,
        }
    )


def create_revised_fallback_paths(feedback: str, goals: str, apps_to_learn: list[str]) -> list[LearningPath]:
    """Fallback paths with level, duration and wording adjusted to the revision feedback."""
    f = feedback.lower()
    wants_advanced = any(word in f for word in ("advanced", "harder", "challenge"))
    wants_beginner = any(word in f for word in ("easier", "beginner", "basic"))
    wants_shorter = any(word in f for word in ("shorter", "faster", "quick"))
    wants_longer = any(word in f for word in ("longer", "more detail", "comprehensive"))

    revised = []
    for index, path in enumerate(create_structured_fallback_paths(goals, apps_to_learn)):
        if wants_advanced:
            level = "Advanced"
        elif wants_beginner:
            level = "Beginner"
        else:
            level = path.level

        if wants_shorter:
            duration, time_commitment = "3-4 weeks", "45min/day"
        elif wants_longer:
            duration, time_commitment = "8-10 weeks", "2hours/day"
        else:
            duration, time_commitment = path.duration, path.time_commitment

        revised.append(
            path.model_copy(
                update={
                    "id": index + 1,
                    "level": level,
                    "duration": duration,
                    "time_commitment": time_commitment,
                    "title": f"Revised {path.title}",
                    "description": f'{path.description} Updated based on your feedback: "{feedback[:30]}..."',
                    "personalized_reason": (
                        f'This revised path addresses your feedback: "{feedback[:40]}..." while maintaining focus '
                        "on your goals"
                    ),
                    "goal_connection": (
                        f'Incorporates your revision requests while serving your original objective: "{goals[:30]}..."'
                    ),
                }
            )
        )
    return revised
