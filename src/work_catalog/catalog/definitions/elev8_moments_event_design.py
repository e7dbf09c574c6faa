"""Elev8 Moments - Event Design Platform."""

from ..core import Project, ProjectAbout, WorkCategory
from ..images import build_large_image, build_secondary_image
from ..registry import register_work

register_work(
    Project(
        id="elev8-moments-event-design",
        title="Elev8 Moments - Event Design Platform",
        description=(
            "Full-service event design and workshop platform for creating intentional, "
            "memorable experiences."
        ),
        category=WorkCategory.PRODUCTS,
        thumbnail_image="/Elev8-Moments/Elev8-logo-moment-dark.svg",
        hero_image=build_large_image(
            "/Elev8-Moments/work/hero%20image.png",
            "Elev8 Moments Event Design Platform",
        ),
        secondary_image=build_secondary_image(
            "/Elev8-Moments/work/secondary%20image.png",
            "Event Design Gallery View",
        ),
        about=ProjectAbout(
            client="Elev8 Moments",
            contribution="Full-Stack Development, UI/UX Design, Brand Integration",
            year="2024",
        ),
        full_description=(
            "Elev8 Moments is a comprehensive digital platform designed to showcase and manage "
            "premium event design services, creative workshops, and thoughtful gifting "
            "solutions. The platform serves as both a portfolio and booking system for "
            "clients seeking intentionally curated experiences that foster connection, "
            "celebration, and meaningful moments."
        ),
        process_image=build_secondary_image(
            "/Elev8-Moments/work/process%20image.png",
            "Development Process",
        ),
        problem_title="The Challenge",
        problem_description=(
            "Event design businesses often struggle to effectively showcase their diverse "
            "service offerings—from event setup and décor to creative workshops and "
            "corporate gifting—in a cohesive digital experience. Traditional websites fail "
            "to capture the emotional essence and attention to detail that defines premium "
            "event services.",
            "The client needed a platform that could elegantly present multiple service "
            "categories (Event Design, Experiences & Workshops, Thoughtful Gifting) while "
            "maintaining a luxurious, intentional brand identity. The challenge was creating "
            "an intuitive navigation system that guides visitors through various offerings "
            "without overwhelming them, while also showcasing a dynamic image gallery that "
            "demonstrates the quality and creativity of their work.",
        ),
        solution_title="The Solution",
        solution_description=(
            "Built with Next.js 14 and TypeScript, the platform leverages modern React "
            "patterns and server-side rendering for optimal performance and SEO. The "
            "architecture features a modular component system with dedicated route sections "
            "for each service category, ensuring scalability and maintainability as the "
            "business grows.",
            "The design system implements a sophisticated color palette (#F9F2EC cream and "
            "#1E1E1E charcoal) with custom typography (NoirEtBlanc for headings, Montserrat "
            "for subheadings, Raleway for body text) that reinforces the brand's elegant, "
            "intentional aesthetic. Responsive layouts adapt seamlessly across devices, with "
            "carefully crafted grid systems that showcase imagery while maintaining "
            "readability. The shared Gallery component provides a unified visual experience "
            "across pages, while dedicated sections for Event Setup & Decor, Tablescapes, "
            "Florals, and Seasonal offerings allow visitors to explore specific services in "
            "depth. Interactive elements include smooth hover transitions, optimized Next.js "
            "Image components for fast loading, and strategic call-to-action placements that "
            "guide users toward booking inquiries.",
        ),
        closing_image=build_large_image(
            "/Elev8-Moments/work/closing%20image.png",
            "Final Platform Experience",
        ),
        external_link="https://moments.elev8rwanda.com/",
    )
)
