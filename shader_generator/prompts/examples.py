"""Worked example shaders appended to the system prompt."""

import textwrap

EXAMPLES = [
    {
        "title": "Ray-marched 3D Cube",
        "glsl": """\
#ifdef GL_ES
precision mediump float;
#endif

uniform float u_time;
uniform vec2 u_resolution;

#define MAX_STEPS 100
#define MAX_DIST 5.0
#define SURF_DIST 0.001

// Rotation matrices
mat3 rotateY(float a) {
    float c = cos(a), s = sin(a);
    return mat3(c, 0, s, 0, 1, 0, -s, 0, c);
}

mat3 rotateX(float a) {
    float c = cos(a), s = sin(a);
    return mat3(1, 0, 0, 0, c, -s, 0, s, c);
}

// Signed Distance Function (SDF) for a cube
float sdfCube(vec3 p, vec3 size) {
    vec3 d = abs(p) - size;
    return min(max(d.x, max(d.y, d.z)), 0.0) + length(max(d, 0.0));
}

// Ray marching function
float rayMarch(vec3 ro, vec3 rd) {
    float dO = 0.0;
    for (int i = 0; i < MAX_STEPS; i++) {
        vec3 p = ro + rd * dO;
        float dS = sdfCube(p, vec3(0.3)); // Cube size
        dO += dS;
        if (dS < SURF_DIST || dO > MAX_DIST) break;
    }
    return dO;
}

// Compute normal from SDF
vec3 getNormal(vec3 p) {
    vec2 e = vec2(0.001, 0.0);
    return normalize(vec3(
        sdfCube(p + e.xyy, vec3(0.3)) - sdfCube(p - e.xyy, vec3(0.3)),
        sdfCube(p + e.yxy, vec3(0.3)) - sdfCube(p - e.yxy, vec3(0.3)),
        sdfCube(p + e.yyx, vec3(0.3)) - sdfCube(p - e.yyx, vec3(0.3))
    ));
}

// Simple lighting
float getLight(vec3 p, vec3 lightPos) {
    vec3 n = getNormal(p);
    vec3 l = normalize(lightPos - p);
    return max(dot(n, l), 0.0);
}

void main() {
    vec2 uv = (gl_FragCoord.xy - 0.5 * u_resolution.xy) / u_resolution.y;

    vec3 ro = vec3(0.0, 0.0, -2.5); // Camera position (moved back)
    vec3 rd = normalize(vec3(uv, 1.0)); // Ray direction

    // Apply rotation
    mat3 rot = rotateY(u_time * 0.5) * rotateX(u_time * 0.3);
    ro = rot * ro;
    rd = rot * rd;

    // Ray march scene
    float dist = rayMarch(ro, rd);
    vec3 color = vec3(0.1, 0.1, 0.2); // Background color

    if (dist < MAX_DIST) {
        vec3 p = ro + rd * dist;
        float light = getLight(p, vec3(2.0, 2.0, -1.0)); // Light position
        color = vec3(light * 1.2, light * 0.5, light * 0.2);
    }

    gl_FragColor = vec4(color, 1.0);
}
""",
    },
]


def format_examples() -> str:
    """Format examples as the numbered section closing the system prompt."""
    parts = ["---", "### **Example Shader Outputs (Must Match This Quality)**"]
    for i, ex in enumerate(EXAMPLES, start=1):
        block = "```glsl\n" + ex["glsl"].rstrip() + "\n```"
        parts.append(f"{i}. **{ex['title']}**\n" + textwrap.indent(block, "   "))
    return "\n".join(parts)
