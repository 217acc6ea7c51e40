from __future__ import annotations

"""Built-in project profiles.

Eyecatchers are random six-character tags that keep marker tokens unique
across features. New ones can be drawn with `random_identifier`.
"""

from piranhito.core.models import ProjectProfile, features, rules, token_pairs

_COMMON_FEATURES = (
    ('**', '@anXjKh@'),
    ('*******', '@7r7cgE@'),
    ('generic', '@KRNgBy@'),
    ('Logger', '@85Lbt3@'),
    ('Tracer', '@O8gSAh@'),
    ('PostReviewer', '@C58Dsg@'),
    ('PreSimulation', '@FZXMf2@'),
    ('Sniffer', '@iw9tXB@'),
    ('APBMRCM', '@YjXXEH@'),
    ('FrzngCnf', '@fpi5v0@'),
    ('KalmanFilter', '@PTBBpC@'),
    ('ParticlesFilter', '@Ggihzf@'),
    ('RollerReader', '@TYv660@'),
    ('Crypto', '@a03nxf@'),
    ('CacheLocal', '@IqglzE@'),
    ('Router', '@ENgIzB@'),
    ('Grapher', '@4Fu5VH@'),
    ('jsNavigator', '@Lz5WOQ@'),
    ('jsGrapher', '@NgAmQD@'),
)

_REMOVABLE_LINES = (
    '/*Piranhito?@-#stmt-@GcDxPQ@*/',
    'Logger.log',
    'Logger.list',
    'Logger.rename',
    'Logger.retrieve',
    'Tracer.trace',
)

_REMOVABLE_TOKENS = (
    '/*Piranhito?@-**-S@anXjKh@*/',
    '/*Piranhito?@-**-E@anXjKh@*/',
    '/*Piranhito?@-ptfgiakPreSimulation-S@FZXMf2@*/',
    '/*Piranhito?@-ptfgiakPreSimulation-E@FZXMf2@*/',
    '/*Piranhito?@-ptfgiakCacheLocal-S@IqglzE@*/',
    '/*Piranhito?@-ptfgiakCacheLocal-E@IqglzE@*/',
)

_TOKEN_REPLACEMENTS = (
    ('/*Piranhito?@-', '/*?@-'),
)

_COPYRIGHT_FEATURES = (
    ('123456', '@654321@'),
)

_COPYRIGHT_LINE = '//  Copyright © 2020-2021 xxx yyy zzz. All rights reserved.\n'

_ENDORSEMENT = (
    '//  The name of xxx yyy zzz may not be used to endorse or promote\n'
    '//  products derived from this software without specific prior written permission.\n'
)

_BSD_DISCLAIMER = (
    '//  THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS" AND\n'
    '//  ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE IMPLIED\n'
    '//  WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE DISCLAIMED.\n'
    '//  IN NO EVENT SHALL xxx yyy zzz BE LIABLE FOR ANY DIRECT, INDIRECT,\n'
    '//  INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES OR INJURIES (INCLUDING,\n'
    '//  BUT NOT LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA,\n'
    '//  OR PROFITS; OR BUSINESS INTERRUPTION; ACCIDENTS INVOLVING DEATH OR INJURIES TO THE\n'
    '//  PHYSICAL AND MENTAL INTEGRITY OF A PERSON; OR DATA PRIVACY AND PROTECTION ISSUES)\n'
    '//  HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY,\n'
    '//  OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE OF THIS\n'
    '//  SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.\n'
)

_MIT_BLOCK = (
    '/*******************************************************************************\n'
    '*\n'
    '* The MIT License (MIT)\n'
    '*\n'
    '* Copyright (c) 2020, 2021, 2022  xxx yyy zzz\n'
    '*\n'
    '* Permission is hereby granted, free of charge, to any person obtaining a copy\n'
    '* of this software and associated documentation files (the "Software"), to deal\n'
    '* in the Software without restriction, including without limitation the rights\n'
    '* to use, copy, modify, merge, publish, distribute, sublicense, and/or sell\n'
    '* copies of the Software, and to permit persons to whom the Software is\n'
    '* furnished to do so, subject to the following conditions:\n'
    '*\n'
    '* The above copyright notice and this permission notice shall be included in\n'
    '* all copies or substantial portions of the Software.\n'
    '*\n'
    '* THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR\n'
    '* IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,\n'
    '* FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE\n'
    '* AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER\n'
    '* LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,\n'
    '* OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN\n'
    '* THE SOFTWARE.\n'
    '*******************************************************************************/\n'
)


ORIENTAMENTO = ProjectProfile(
    id='Orientamento',
    features=features(_COMMON_FEATURES),
    substitutions=rules([
        ('from', 'to'),
        ('from', 'to'),
        ('...', '....'),
        ('public func contains(_ element: Element) -> Bool', 'public func include(_ element: Element) -> Bool'),
        ('guard contains(element)', 'guard include(element)'),
    ]),
    removable_lines=_REMOVABLE_LINES,
    removable_tokens=_REMOVABLE_TOKENS,
    token_replacements=token_pairs(_TOKEN_REPLACEMENTS),
    copyright_features=features(_COPYRIGHT_FEATURES),
    copyright_substitutions=rules([
        ('Created by xxx yyy', 'Created by xxx yyy zzz'),
        (_COPYRIGHT_LINE, ''),
        (_ENDORSEMENT + _BSD_DISCLAIMER, _ENDORSEMENT + _MIT_BLOCK),
    ]),
)

# Same feature set minus "Sniffer", which this utility ships.
SNIFFER_UTIL = ProjectProfile(
    id='SnifferUtil',
    features=features(f for f in _COMMON_FEATURES if f[0] != 'Sniffer'),
    substitutions=rules([
        ('qwerty', 'qwertyUtil'),
        ('salma', 'salmaUtil'),
    ]),
    removable_lines=_REMOVABLE_LINES,
    removable_tokens=_REMOVABLE_TOKENS,
    token_replacements=token_pairs(_TOKEN_REPLACEMENTS),
    copyright_features=features(_COPYRIGHT_FEATURES),
    copyright_substitutions=rules([
        ('Created by xxx zzz', 'Created by xxx yyy zzz'),
        ('Created by x. zzz', 'Created by xxx yyy zzz'),
        ('Created by x.y. zzz', 'Created by xxx yyy zzz'),
        ('Created by xxx y. zzz', 'Created by xxx yyy zzz'),
        ('Created by xxx y zzz', 'Created by xxx yyy zzz'),
        (_COPYRIGHT_LINE, _COPYRIGHT_LINE + _ENDORSEMENT + _BSD_DISCLAIMER),
    ]),
)

BUILTIN_PROFILES: tuple[ProjectProfile, ...] = (ORIENTAMENTO, SNIFFER_UTIL)
