from __future__ import annotations

from dataclasses import dataclass
import re


@dataclass(frozen=True)
class MessySample:
    name: str
    code: str

    @property
    def filename(self) -> str:
        slug = re.sub(r"[^a-z0-9]+", "_", self.name.lower()).strip("_")
        return f"{slug}.py"


MESSY_CODE_SAMPLES: list[MessySample] = [
    MessySample(
        name="Bad Formatting",
        code="""
import   os, sys
def my_func(a,b,c,d,e,f):
 print("hello world")
 if a==True and b==False:
  return (a,b,c,d,e,f)

class MyClass:
    def __init__(self, val):
     self.value=val
    def get_value(self):
      return self.value
""".strip(),
    ),
    MessySample(
        name="Long Lines",
        code="""
def long_function_name(parameter_one, parameter_two, parameter_three, parameter_four, parameter_five, parameter_six):
    print("This is a very long line of code that definitely exceeds the recommended line length limit in PEP 8 and should be wrapped nicely.")
    result = parameter_one + parameter_two + parameter_three + parameter_four + parameter_five + parameter_six
    return result
""".strip(),
    ),
    MessySample(
        name="Inconsistent Spacing",
        code="""
x=10
y = 20
z= 30
my_list=[1,2, 3,4]
my_dict = {'key1': 'value1','key2':'value2'}
def func ( arg1,arg2 ):
    return arg1+arg2
""".strip(),
    ),
    MessySample(
        name="Naming & Constants",
        code="""
def calc(d):
    # calculates area
    r = d / 2
    a = 3.14 * r * r
    return a

val = 10
area = calc(val)
""".strip(),
    ),
    MessySample(
        name="Mixed Quotes",
        code="""
def check_status(user_active, is_admin):
    status_msg = 'pending'
    if user_active == True:
        status_msg = "active"
    else:
        status_msg = 'inactive'
    return status_msg
""".strip(),
    ),
    MessySample(
        name="Compact & Undocumented",
        code="""
def add(x,y): return x+y; print("done")

class calculator:
    def multiply(self, a, b):
        result=a*b;return result
""".strip(),
    ),
]
