"""Template wrapping the caller's description into the user message."""

USER_PROMPT_TEMPLATE = """Generate a valid GLSL shader code based on the following description: "{prompt}".

The shader should:
1. Be a complete, compilable GLSL fragment shader
2. Include comments explaining key parts
3. Use uniform variables for any animation effects (time, resolution)
4. Follow this basic structure:

```glsl
#ifdef GL_ES
precision mediump float;
#endif

uniform float u_time;
uniform vec2 u_resolution;

void main() {{
  // Shader code here
  // ...

  // Final color output
  gl_FragColor = vec4(color, 1.0);
}}
```

Return ONLY the shader code without any additional text, explanations, or markdown.
"""


def build_user_prompt(prompt: str) -> str:
    return USER_PROMPT_TEMPLATE.format(prompt=prompt)
