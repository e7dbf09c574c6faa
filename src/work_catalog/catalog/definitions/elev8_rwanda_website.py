"""Elev8 Rwanda Corporate Website."""

from ..core import Project, ProjectAbout, WorkCategory
from ..images import build_large_image, build_secondary_image
from ..registry import register_work

register_work(
    Project(
        id="elev8-rwanda-website",
        title="Elev8 Rwanda Corporate Website",
        description="Multi-brand corporate website with CMS integration and internationalization.",
        category=WorkCategory.PRODUCTS,
        thumbnail_image="/Elev8/Elev8-logo-dark.svg",
        hero_image=build_large_image(
            "/Elev8/work/Heroimage.png",
            "Elev8 Rwanda Website Hero",
        ),
        secondary_image=build_secondary_image(
            "/Elev8/work/secondaryImage.png",
            "Elev8 Rwanda Multi-Brand Interface",
        ),
        about=ProjectAbout(
            client="Elev8 Rwanda",
            contribution="Full-Stack Development, UI/UX Design, CMS Integration",
            year="2024",
        ),
        full_description=(
            "A comprehensive corporate website built for Elev8 Rwanda, featuring two distinct "
            "sub-brands: Elev8 Media (digital marketing and media production) and Elev8 "
            "Moments (event planning and management). The platform integrates Sanity CMS for "
            "dynamic content management, supports three languages (English, French, Arabic), "
            "and includes a complete blog system with category filtering and detailed post "
            "pages."
        ),
        process_image=build_secondary_image(
            "/Elev8/work/processimage.png",
            "Elev8 Development Process",
        ),
        problem_title="The Challenge",
        problem_description=(
            "Elev8 Rwanda needed a unified digital presence that could effectively showcase "
            "two distinct sub-brands while maintaining a cohesive corporate identity. The "
            "challenge was to create a scalable platform that could handle multilingual "
            "content, dynamic service offerings, and portfolio showcases for both media "
            "production and event management services.",
            "The website needed to serve multiple audiences: potential clients seeking media "
            "services, event planning customers, blog readers, and business partners. "
            "Additionally, the content team required an intuitive CMS to manage services, "
            "team members, testimonials, blog posts, and brand-specific portfolios without "
            "technical knowledge.",
        ),
        solution_title="The Solution",
        solution_description=(
            "Built with Next.js 14 and TypeScript, leveraging App Router for optimal "
            "performance and SEO. Integrated Sanity CMS with custom schema types for flexible "
            "content management across home pages, services, brands, team members, "
            "testimonials, and blog posts. Implemented a robust internationalization system "
            "supporting English, French, and Arabic with locale-specific routing.",
            "Designed a modular component architecture with 12+ reusable home sections "
            "including hero, services, stats, testimonials, team showcase, blog preview, and "
            "newsletter subscription. Created dedicated brand pages for Elev8 Media and Elev8 "
            "Moments with unique service packages, portfolio galleries, and event type "
            "showcases. Implemented dark mode support with next-themes and built a "
            "comprehensive UI component library using Radix UI and Tailwind CSS for "
            "consistent design across all pages.",
        ),
        closing_image=build_large_image(
            "/Elev8/work/ClosingImage.png",
            "Elev8 Rwanda Final Product",
        ),
        external_link="https://www.elev8rwanda.com/en",
    )
)
