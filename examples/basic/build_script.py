"""Render a small Gradle build script from an element tree.

Run: python examples/basic/build_script.py
"""

from blockscribe import Block, BlockBuilder, Line, RenderConfig, render_all


def main() -> None:
    plugins = Block("plugins", [Line("id 'java-library'"), Line("id 'org.jetbrains.kotlin.jvm'")])

    dependencies = (
        BlockBuilder("dependencies")
        .line("api 'com.squareup.okio:okio:3.9.0'")
        .line("testImplementation 'junit:junit:4.13.2'")
        .build()
    )

    repositories = BlockBuilder("repositories").line("mavenCentral()").build()

    # Build scripts conventionally end with a newline
    config = RenderConfig(indent_unit="  ", trailing_newline=True)
    print(render_all([plugins, repositories, dependencies], config=config), end="")


if __name__ == "__main__":
    main()
