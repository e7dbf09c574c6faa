"""Corevia Financial Management Platform."""

from ..core import Project, ProjectAbout, WorkCategory
from ..images import build_large_image, build_secondary_image
from ..registry import register_work

register_work(
    Project(
        id="corevia-financial-platform",
        title="Corevia Financial Management Platform",
        description=(
            "Modern financial consulting website with comprehensive service pages "
            "and responsive design."
        ),
        category=WorkCategory.PRODUCTS,
        thumbnail_image=(
            "https://cdn.prod.website-files.com/687a676ef5e70f7d641d3080/"
            "687ff334971f215c6e7c3f51_LogoCorevia.svg"
        ),
        hero_image=build_large_image(
            "/Coreva/work/Hero_image.png",
            "Corevia Financial Platform Hero",
        ),
        secondary_image=build_secondary_image(
            "/Coreva/work/Secondary.png",
            "Corevia Multi-Page Interface",
        ),
        about=ProjectAbout(
            client="Corevia Consulting",
            contribution="Frontend Development, UI Implementation, Responsive Design",
            year="2024",
        ),
        full_description=(
            "A comprehensive financial management platform built for Corevia Consulting, "
            "featuring multiple service pages including Home, About, Features, Pricing, "
            "Blog, and Contact. The platform showcases financial analytics tools, "
            "investment management services, and digital transformation solutions. "
            "Built with modern web technologies to deliver a seamless user experience "
            "across all devices with intuitive navigation and engaging visual design."
        ),
        process_image=build_secondary_image(
            "/Coreva/work/processing.png",
            "Corevia Development Process",
        ),
        problem_title="The Challenge",
        problem_description=(
            "Corevia Consulting needed a professional digital presence to showcase their "
            "financial management and consulting services to potential clients. The "
            "challenge was to create a scalable, multi-page website that could effectively "
            "communicate complex financial concepts while maintaining an approachable and "
            "modern aesthetic. The platform needed to serve diverse audiences including "
            "small businesses, growing teams, and enterprise clients.",
            "The website required clear presentation of service offerings across budgeting "
            "tools, investment management, digital transformation consulting, and market "
            "expansion strategies. Additionally, the platform needed to include comprehensive "
            "pricing tiers, client testimonials, blog functionality for thought leadership "
            "content, and contact forms for lead generation—all while maintaining "
            "consistent branding and optimal performance across desktop, tablet, and mobile "
            "devices.",
        ),
        solution_title="The Solution",
        solution_description=(
            "Built with Next.js 16 and TypeScript, leveraging the App Router architecture for "
            "optimal performance and SEO capabilities. Implemented a component-based "
            "architecture with dedicated page sections for hero, about, benefits, features, "
            "core capabilities, pricing, testimonials, blog preview, and call-to-action "
            "modules. Created seven distinct pages (Home, About, Features, Pricing, Blog, "
            "Blog Detail, Contact) with consistent navigation and footer components.",
            "Designed a modular component system with reusable elements across landing, "
            "feature, pricing, blog, and contact sections. Implemented responsive layouts "
            "using Tailwind CSS for consistent styling and mobile-first design principles. "
            "Created three-tier pricing structure (Starter, Growth, Scale plans) with "
            "detailed feature comparisons, animated scroll effects for enhanced user "
            "engagement, and optimized image carousels showcasing platform capabilities. "
            "Deployed on Netlify for reliable hosting with continuous deployment integration.",
        ),
        closing_image=build_large_image(
            "/Coreva/work/footerimage.png",
            "Corevia Platform Final Product",
        ),
        external_link="https://corevias.netlify.app/",
    )
)
